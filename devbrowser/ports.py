# ports.py
import shutil
import socket
import subprocess
import sys
from typing import List, Optional, Sequence

from .constants import logger, DEV_SERVER_PORTS, PROBE_CONNECT_TIMEOUT
from .models import DevServer


def _listen_command(port: int) -> str:
    if sys.platform == 'win32':
        return f'netstat -an | findstr ":{port}.*LISTENING"'
    return f'lsof -i:{port} -P -n 2>/dev/null | grep LISTEN'


def _probe_tool() -> str:
    return 'netstat' if sys.platform == 'win32' else 'lsof'


def _is_port_connectable(port: int) -> bool:
    try:
        with socket.create_connection(('127.0.0.1', port), timeout=PROBE_CONNECT_TIMEOUT):
            return True
    except OSError:
        return False


def is_port_listening(port: int) -> bool:
    """指定ポートでプロセスが待ち受けているか（HTTPかどうかは確認しない）"""
    if shutil.which(_probe_tool()) is None:
        logger.debug(f"{_probe_tool()} not found, probing port {port} with a TCP connect")
        return _is_port_connectable(port)
    try:
        subprocess.run(_listen_command(port), shell=True, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError:
        return False
    except OSError as e:
        logger.debug(f"Probe command failed for port {port}: {e}")
        return _is_port_connectable(port)
    return True


def detect_dev_servers(ports: Sequence[int] = DEV_SERVER_PORTS) -> List[DevServer]:
    servers = []
    for port in ports:
        listening = is_port_listening(port)
        logger.debug(f"Port {port}: {'listening' if listening else 'closed'}")
        if listening:
            servers.append(DevServer(port=port, url=f"http://localhost:{port}"))
    return servers


def resolve_target(url: Optional[str] = None, ports: Sequence[int] = DEV_SERVER_PORTS) -> Optional[str]:
    """
    検証対象のURLを決定する。

    - URL指定あり: そのまま使用（ポートスキャンはしない）
    - サーバーなし: None
    - 1台: そのURL
    - 複数: 一覧を表示し、スキャン順で最初のもの
    """
    if url:
        return url

    servers = detect_dev_servers(ports)
    if not servers:
        logger.error("❌ No dev server detected. Start your dev server or provide a URL.")
        logger.info("   Usage: verify http://localhost:3000")
        return None

    if len(servers) == 1:
        logger.info(f"🔍 Detected dev server: {servers[0].url}")
        return servers[0].url

    logger.warning("🔍 Multiple dev servers detected:")
    for i, server in enumerate(servers, 1):
        logger.warning(f"   {i}. {server.url}")
    logger.warning(f"   Using: {servers[0].url}")
    return servers[0].url
