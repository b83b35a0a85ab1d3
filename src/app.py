# ============================================================
# FramerBot FastAPI App
# ------------------------------------------------------------
# Backend for the chat client:
#   - POST /api/framer: prompt + uploaded files -> Framer code
#   - Support for Ollama, OpenAI, or Echo clients
#   - Health checks
# ============================================================

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from pydantic import BaseModel
from typing import List, Optional, Dict, Any, Tuple

# --- Local imports ---
from src.settings import settings
from src.logs import get_logger
from src.generate import CodeGenerator, CodeResponse, select_model_client
from src.session.staging import is_allowed

logger = get_logger("api")

# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
model_client = select_model_client(settings)
code_gen = CodeGenerator(model_client=model_client)

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="FramerBot API", version="0.3")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class FramerPayload(BaseModel):
    code: str
    meta: Dict[str, Any]

# ------------------------------------------------------------
# 🧩 Code generation route
# ------------------------------------------------------------
@app.post("/api/framer", response_model=FramerPayload)
def framer(query: str = Form(...), files: Optional[List[UploadFile]] = File(default=None)):
    if not query.strip():
        raise HTTPException(status_code=422, detail="query must not be blank")

    uploads: List[Tuple[str, bytes]] = []
    for f in files or []:
        name = f.filename or ""
        if not is_allowed(name):
            logger.info("skipping upload %r: extension not allowed", name)
            continue
        uploads.append((name, f.file.read()))

    try:
        out: CodeResponse = code_gen.generate(query, uploads)
    except Exception:
        logger.exception("code generation failed")
        raise HTTPException(status_code=502, detail="code generation failed")

    return FramerPayload(
        code=out.code,
        meta={
            **out.meta,
            "files": [name for name, _ in uploads],
            "engine_class": type(code_gen.model_client).__name__,
        },
    )

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
    }

@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}

@app.get("/")
def hello():
    return {"message": "FramerBot service running."}
