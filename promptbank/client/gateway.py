"""HTTP gateway from the client core to the Promptbank API.

Every call returns an ``ActionResult`` instead of raising: HTTP errors,
transport failures and undecodable bodies all become an ``ActionError``
whose ``kind`` tells the UI how to report it. Successful mutations fire
the registered revalidation listeners so the state shell can re-seed.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION = "validation"
    DATA = "data"


@dataclass(frozen=True)
class ActionError:
    kind: ErrorKind
    message: str
    field: Optional[str] = None
    code: Optional[str] = None


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one action: ``data`` on success, ``error`` otherwise."""

    data: Any = None
    error: Optional[ActionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any = None) -> "ActionResult":
        return cls(data=data)

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        message: str,
        field: Optional[str] = None,
        code: Optional[str] = None,
    ) -> "ActionResult":
        return cls(error=ActionError(kind=kind, message=message, field=field, code=code))

    @classmethod
    def invalid(cls, message: str, field: Optional[str] = None) -> "ActionResult":
        """Client-side validation failure, produced before any request is sent."""
        return cls.failure(ErrorKind.VALIDATION, message, field=field, code="VALIDATION_ERROR")


def _error_from_response(resp: httpx.Response) -> ActionError:
    try:
        body = resp.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    code = body.get("error")
    message = body.get("message") or body.get("detail") or f"Request failed ({resp.status_code})"
    details = body.get("details") if isinstance(body.get("details"), dict) else {}

    if resp.status_code == 401 or code == "UNAUTHENTICATED":
        kind = ErrorKind.UNAUTHENTICATED
    elif code == "VALIDATION_ERROR":
        kind = ErrorKind.VALIDATION
    else:
        kind = ErrorKind.DATA
    return ActionError(kind=kind, message=str(message), field=details.get("field"), code=code)


class ActionsClient:
    """Synchronous client for the server actions.

    Args:
        http: Pre-built ``httpx.Client`` (e.g. FastAPI's ``TestClient``). When
              omitted one is created from ``PROMPTBANK_API_URL`` and
              ``PROMPTBANK_API_TIMEOUT``.
        token: Session token from a previous sign-in.
    """

    def __init__(self, http: Optional[httpx.Client] = None, token: Optional[str] = None):
        if http is None:
            http = httpx.Client(
                base_url=os.environ.get("PROMPTBANK_API_URL", DEFAULT_API_URL),
                timeout=float(os.environ.get("PROMPTBANK_API_TIMEOUT", str(DEFAULT_TIMEOUT))),
            )
        self._http = http
        self.token = token
        self._listeners: list[Callable[[], None]] = []

    # ----- plumbing --------------------------------------------------------

    def on_revalidate(self, listener: Callable[[], None]) -> None:
        """Register a callback fired after every successful mutation."""
        self._listeners.append(listener)

    def _revalidate(self) -> None:
        for listener in list(self._listeners):
            listener()

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _call(self, method: str, path: str, mutation: bool = False, **kwargs: Any) -> ActionResult:
        try:
            resp = self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            return ActionResult.failure(ErrorKind.DATA, str(exc) or exc.__class__.__name__)

        if resp.status_code >= 400:
            error = _error_from_response(resp)
            logger.info("%s %s -> %s %s", method, path, resp.status_code, error.code)
            return ActionResult(error=error)

        data = None
        if resp.status_code != 204 and resp.content:
            try:
                data = resp.json()
            except ValueError:
                return ActionResult.failure(ErrorKind.DATA, "Invalid response from server")

        if mutation:
            self._revalidate()
        return ActionResult.success(data)

    def close(self) -> None:
        self._http.close()

    # ----- auth ------------------------------------------------------------

    def sign_up(self, email: str, password: str) -> ActionResult:
        return self._call("POST", "/api/auth/signup", json={"email": email, "password": password})

    def sign_in(self, email: str, password: str) -> ActionResult:
        result = self._call("POST", "/api/auth/signin", json={"email": email, "password": password})
        if result.ok:
            self.token = result.data["token"]
        return result

    def get_current_user(self) -> ActionResult:
        return self._call("GET", "/api/auth/me")

    def sign_out(self) -> ActionResult:
        result = self._call("POST", "/api/auth/signout")
        # The local token is useless either way once the user asked to leave.
        self.token = None
        return result

    # ----- workspace -------------------------------------------------------

    def get_workspace(self) -> ActionResult:
        return self._call("GET", "/api/workspace")

    def get_revision(self) -> ActionResult:
        return self._call("GET", "/api/workspace/revision")

    # ----- folders ---------------------------------------------------------

    def list_folders(self) -> ActionResult:
        return self._call("GET", "/api/folders")

    def create_folder(self, name: str, color: Optional[str] = None) -> ActionResult:
        body: dict[str, Any] = {"name": name}
        if color is not None:
            body["color"] = color
        return self._call("POST", "/api/folders", mutation=True, json=body)

    def update_folder(self, folder_id: str, **fields: Any) -> ActionResult:
        return self._call("PUT", f"/api/folders/{folder_id}", mutation=True, json=fields)

    def delete_folder(self, folder_id: str) -> ActionResult:
        return self._call("DELETE", f"/api/folders/{folder_id}", mutation=True)

    # ----- prompts ---------------------------------------------------------

    def list_prompts(self, folder_id: Optional[str] = None) -> ActionResult:
        params = {"folder_id": folder_id} if folder_id else None
        return self._call("GET", "/api/prompts", params=params)

    def search_prompts(self, text: str) -> ActionResult:
        return self._call("GET", "/api/prompts/search", params={"q": text})

    def create_prompt(
        self,
        folder_id: str,
        title: str,
        content: str,
        tags: Optional[list[str]] = None,
    ) -> ActionResult:
        body = {"folder_id": folder_id, "title": title, "content": content, "tags": list(tags or [])}
        return self._call("POST", "/api/prompts", mutation=True, json=body)

    def update_prompt(self, prompt_id: str, **fields: Any) -> ActionResult:
        return self._call("PUT", f"/api/prompts/{prompt_id}", mutation=True, json=fields)

    def delete_prompt(self, prompt_id: str) -> ActionResult:
        return self._call("DELETE", f"/api/prompts/{prompt_id}", mutation=True)

    # ----- transfer --------------------------------------------------------

    def export_all(self) -> ActionResult:
        return self._call("GET", "/api/export")

    def import_all(self, folders: list[dict], prompts: list[dict]) -> ActionResult:
        return self._call(
            "POST", "/api/import", mutation=True, json={"folders": folders, "prompts": prompts}
        )
