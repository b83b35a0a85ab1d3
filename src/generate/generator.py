# ============================================================
# CodeGenerator
# ------------------------------------------------------------
# Backend half of /api/framer:
#   - accepts any model client (Ollama, OpenAI, Echo)
#   - system prompt + tuning come from config.yaml
#   - uploaded files are folded into the user message
#   - the first fenced code block of the reply is the result
# ============================================================

from __future__ import annotations
import re
import yaml
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from src.logs import get_logger
from src.settings import Settings, settings as default_settings

from .types import CodeResponse, Message, ModelParams

logger = get_logger("generator")

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")
DEFAULT_SYSTEM_PROMPT = "You write production-ready Framer code components."

_FENCE = re.compile(r"```[\w+-]*[ \t]*\n(.*?)```", re.DOTALL)


def extract_code(reply: str) -> str:
    """Body of the first fenced block, or the whole reply when there is none."""
    m = _FENCE.search(reply or "")
    if m:
        return m.group(1).strip()
    return (reply or "").strip()


def select_model_client(cfg: Optional[Settings] = None):
    """USE_OLLAMA -> Ollama; OPENAI_API_KEY -> OpenAI; otherwise the offline echo client."""
    cfg = cfg or default_settings
    if cfg.USE_OLLAMA:
        from src.generate.clients.ollama_client import OllamaClient
        return OllamaClient(model=cfg.OLLAMA_MODEL, host=cfg.OLLAMA_HOST)
    if cfg.OPENAI_API_KEY:
        from src.generate.clients.openai_client import OpenAIClient
        return OpenAIClient(model=cfg.OPENAI_MODEL, api_key=cfg.OPENAI_API_KEY)
    from src.generate.clients.echo_dev_client import EchoDevClient
    return EchoDevClient()


class CodeGenerator:
    def __init__(self, model_client, config_path: Optional[Path] = None):
        self.model_client = model_client
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self.cfg = self._load_config()

    def _load_config(self) -> dict:
        if not self.config_path.exists():
            logger.warning("generator config not found at %s, using defaults", self.config_path)
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _compose_system_message(self) -> str:
        return (self.cfg.get("system_prompt") or DEFAULT_SYSTEM_PROMPT).strip()

    def _compose_user_message(self, prompt: str, files: Sequence[Tuple[str, bytes]]) -> str:
        """Attach decoded file excerpts to the prompt; binary files are listed by name."""
        if not files:
            return prompt
        limit = int(self.cfg.get("max_file_chars", 6000))
        parts: List[str] = [prompt, "", "Attached files:"]
        for name, content in files:
            try:
                text = content.decode("utf-8")
            except UnicodeDecodeError:
                parts.append(f"--- FILE: {name} (binary, {len(content)} bytes) ---")
                continue
            if len(text) > limit:
                text = text[:limit] + "\n... [truncated]"
            parts.append(f"--- FILE: {name} ---\n{text}")
        return "\n".join(parts)

    def generate(
        self,
        prompt: str,
        files: Sequence[Tuple[str, bytes]] = (),
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> CodeResponse:
        """Main entry point for generation."""
        messages = [
            Message(role="system", content=self._compose_system_message()),
            Message(role="user", content=self._compose_user_message(prompt, files)),
        ]
        params = ModelParams(
            temperature=temperature or self.cfg.get("temperature", 0.3),
            max_tokens=max_tokens or self.cfg.get("max_tokens", 2000),
        )

        reply, meta = self.model_client.generate(messages, params)
        logger.info("model %s replied with %d chars", meta.get("model"), len(reply))
        return CodeResponse(code=extract_code(reply), raw=reply, meta=meta)
