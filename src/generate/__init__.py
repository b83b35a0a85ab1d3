# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import CodeGenerator, extract_code, select_model_client
from .types import Message, CodeResponse, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = ["CodeGenerator", "extract_code", "select_model_client", "Message", "CodeResponse", "ModelParams", "EchoDevClient"]
