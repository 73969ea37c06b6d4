# models.py
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, List, Dict, Any


class Phase(Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    LAUNCHING = "launching"
    NAVIGATING = "navigating"
    INSPECTING = "inspecting"
    CAPTURING_SCREENSHOT = "capturing_screenshot"
    MONITORING_CONSOLE = "monitoring_console"
    CLOSING = "closing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class DevServer:
    port: int
    url: str


@dataclass
class PageInfo:
    url: str
    title: str
    viewport: Optional[Dict[str, int]] = None


@dataclass
class InteractiveElement:
    """ページ上の操作可能要素（text/hrefは切り詰め済み）"""
    index: int
    tag: str
    type: Optional[str] = None
    text: Optional[str] = None
    name: Optional[str] = None
    id: Optional[str] = None
    placeholder: Optional[str] = None
    href: Optional[str] = None

    @property
    def is_identifiable(self) -> bool:
        return bool(self.text or self.name or self.id or self.placeholder)

    def describe(self) -> str:
        label = self.text or self.placeholder or self.name or self.id or 'unnamed'
        type_str = f"[{self.type}]" if self.type else ""
        return f"{self.tag}{type_str}: {label}"


@dataclass
class VerificationResult:
    """1回の検証実行の結果"""
    target_url: Optional[str] = None
    phase: Phase = Phase.IDLE
    failed_at: Optional[Phase] = None
    page_info: Optional[PageInfo] = None
    elements: List[InteractiveElement] = field(default_factory=list)
    screenshot_path: Optional[str] = None
    console_errors: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.phase is Phase.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def fail(self, error: str) -> None:
        self.failed_at = self.phase
        self.phase = Phase.FAILED
        self.error = error

    def to_dict(self) -> Dict[str, Any]:
        return {
            'target_url': self.target_url,
            'phase': self.phase.value,
            'failed_at': self.failed_at.value if self.failed_at else None,
            'error': self.error,
            'page_info': asdict(self.page_info) if self.page_info else None,
            'elements': [asdict(el) for el in self.elements],
            'screenshot_path': self.screenshot_path,
            'console_errors': list(self.console_errors),
        }
