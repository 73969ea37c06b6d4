#!/usr/bin/env python3
"""
Dev Browser: ローカル開発サーバーの表示確認
エントリポイント

使用方法:
  python main.py [url] [--screenshot name] [--report path]

例:
  python main.py http://localhost:3000
  python main.py http://localhost:3000/login --screenshot login-page
"""
import sys
import os
# Windowsのコンソールエンコーディング問題を解決
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8')
    sys.stderr.reconfigure(encoding='utf-8')
    os.environ['PYTHONIOENCODING'] = 'utf-8'

from devbrowser.main import run_cli

if __name__ == "__main__":
    run_cli()
