# apps/notebook_common/utils.py
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from django.conf import settings

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    success: bool
    error: Optional[str] = None
    data: Optional[Any] = None
    # HTTP 로 내보낼 때 쓸 상태 코드 (to_dict 에는 안 들어감)
    status: int = 200

    @classmethod
    def ok(cls, data: Any = None) -> "ActionResult":
        return cls(True, data=data)

    @classmethod
    def fail(cls, error: str, status: int = 400) -> "ActionResult":
        return cls(False, error=error, status=status)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"success": self.success}
        if self.error:
            out["error"] = self.error
        if self.data is not None:
            out["data"] = self.data
        return out


def get_credential(name: str, missing_message: str) -> str:
    """
    API 키를 호출 시점에 읽는다.

    읽는 우선순위:
    1) Django settings.<name>
    2) 환경변수 <name>

    둘 다 비어 있으면 ConfigurationError(missing_message).
    """
    value = getattr(settings, name, None) or os.getenv(name)
    if not value:
        logger.error("[config] %s 미설정", name)
        raise ConfigurationError(missing_message)
    return value
