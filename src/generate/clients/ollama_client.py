# Model client for Ollama local inference.
# Same interface as the others: generate(messages, params) -> (text, meta).

import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams


class OllamaClient:
    def __init__(self, model: str = "mistral:7b-instruct", host: str = "http://localhost:11434", timeout: float = 180):
        self.model = model
        self.host = host.rstrip("/")
        self.timeout = timeout

    def set_model(self, model: str):
        self.model = model

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        system = "\n".join(m.content for m in messages if m.role == "system")
        payload = {
            "model": self.model,
            "system": system,
            "prompt": self._compose_prompt([m for m in messages if m.role != "system"]),
            "stream": False,
            "options": {
                "temperature": float(params.temperature or 0.3),
                "num_predict": int(params.max_tokens or 2000),
            },
        }
        resp = requests.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
