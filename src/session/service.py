# Generation service clients used by the orchestrator.
# Both expose generate(request) -> code text and raise GenerationServiceFailure
# for every way the call can go wrong.

from __future__ import annotations
from typing import TYPE_CHECKING, Any, List, Protocol, Tuple

import requests

from src.logs import get_logger

from .errors import GenerationServiceFailure
from .types import GenerationRequest

if TYPE_CHECKING:
    from src.generate.generator import CodeGenerator

logger = get_logger("generation_service")

FRAMER_PATH = "/api/framer"


class GenerationService(Protocol):
    def generate(self, request: GenerationRequest) -> str: ...


class HttpGenerationService:
    """POSTs multipart query + files to the FramerBot backend."""

    def __init__(self, base_url: str, timeout: float = 120.0, session: Any = None):
        self.url = base_url.rstrip("/") + FRAMER_PATH
        self.timeout = timeout
        self.http = session or requests.Session()

    def _files(self, request: GenerationRequest) -> List[Tuple[str, Tuple[str, bytes]]]:
        return [("files", (a.name, a.content)) for a in request.attachments]

    def generate(self, request: GenerationRequest) -> str:
        try:
            resp = self.http.post(
                self.url,
                data={"query": request.final_prompt},
                files=self._files(request) or None,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GenerationServiceFailure(GenerationServiceFailure.TRANSPORT, str(e)) from e

        if not 200 <= resp.status_code < 300:
            raise GenerationServiceFailure(GenerationServiceFailure.STATUS, f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise GenerationServiceFailure(GenerationServiceFailure.MALFORMED, "response is not JSON") from e

        code = data.get("code") if isinstance(data, dict) else None
        if not isinstance(code, str):
            raise GenerationServiceFailure(GenerationServiceFailure.MALFORMED, "missing 'code' field")
        logger.info("generated %d chars via %s", len(code), self.url)
        return code


class LocalGenerationService:
    """Runs the CodeGenerator in process; no HTTP hop."""

    def __init__(self, generator: "CodeGenerator"):
        self.generator = generator

    def generate(self, request: GenerationRequest) -> str:
        files = [(a.name, a.content) for a in request.attachments]
        try:
            out = self.generator.generate(request.final_prompt, files)
        except Exception as e:
            raise GenerationServiceFailure(GenerationServiceFailure.TRANSPORT, repr(e)) from e
        return out.code
