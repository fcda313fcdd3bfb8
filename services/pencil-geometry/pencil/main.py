from fastapi import FastAPI
from .api import router as pencil_router
from .config import configure_logging

configure_logging()

app = FastAPI(title="Pencil Geometry")
app.include_router(pencil_router)

@app.get("/health")
def health():
    return {"status": "ok"}
