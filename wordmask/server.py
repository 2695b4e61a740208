from __future__ import annotations
from fastapi import FastAPI, HTTPException
import logging
from .config import settings
from .logging_conf import setup_logging
from .models.masking import (
    MaskRequest, MaskResponse, DecodeRequest, DecodeResponse,
    WordsUpsert, WordsResponse, ModeUpsert, ModeResponse,
)
from .stores.word_store import WordStore
from .utils.textguards import apply_mode, decode

VERSION = "1.0.0"

setup_logging(settings.log_level)
app = FastAPI(title="Word Mask API", version=VERSION)
logger = logging.getLogger(__name__)

def _check_length(text: str):
    if len(text) > settings.max_text_length:
        raise HTTPException(status_code=413, detail=f"text longer than {settings.max_text_length} chars")

@app.get("/healthz")
async def healthz():
    return {"status": "ok", "version": VERSION}

@app.post("/v1/mask", response_model=MaskResponse)
async def mask_text(req: MaskRequest):
    _check_length(req.text)
    try:
        ws = WordStore()
        words = req.words if req.words is not None else await ws.load_words(req.client_id)
        mode = req.mode or await ws.get_mode(req.client_id)
        return MaskResponse(text=apply_mode(req.text, words, mode), mode=mode)
    except Exception as e:
        logger.exception("/v1/mask failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

@app.post("/v1/decode", response_model=DecodeResponse)
async def decode_text(req: DecodeRequest):
    _check_length(req.text)
    try:
        words = req.words if req.words is not None else await WordStore().load_words(req.client_id)
        return DecodeResponse(text=decode(req.text, words))
    except Exception as e:
        logger.exception("/v1/decode failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

@app.put("/v1/words/{client_id}", response_model=WordsResponse)
async def words_upsert(client_id: str, req: WordsUpsert):
    try:
        words = await WordStore().save_words(client_id, req.words)
        return WordsResponse(client_id=client_id, words=words)
    except Exception as e:
        logger.exception("/v1/words/%s upsert failed: %s", client_id, e)
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/v1/words/{client_id}", response_model=WordsResponse)
async def words_get(client_id: str):
    try:
        return WordsResponse(client_id=client_id, words=await WordStore().load_words(client_id))
    except Exception as e:
        logger.exception("/v1/words/%s failed: %s", client_id, e)
        raise HTTPException(status_code=500, detail=str(e))

@app.delete("/v1/words/{client_id}")
async def words_clear(client_id: str):
    try:
        await WordStore().clear_words(client_id)
        return {"status": "ok"}
    except Exception as e:
        logger.exception("/v1/words/%s clear failed: %s", client_id, e)
        raise HTTPException(status_code=500, detail=str(e))

@app.put("/v1/mode/{client_id}", response_model=ModeResponse)
async def mode_upsert(client_id: str, req: ModeUpsert):
    try:
        await WordStore().set_mode(client_id, req.mode)
        return ModeResponse(client_id=client_id, mode=req.mode)
    except Exception as e:
        logger.exception("/v1/mode/%s upsert failed: %s", client_id, e)
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/v1/mode/{client_id}", response_model=ModeResponse)
async def mode_get(client_id: str):
    try:
        return ModeResponse(client_id=client_id, mode=await WordStore().get_mode(client_id))
    except Exception as e:
        logger.exception("/v1/mode/%s failed: %s", client_id, e)
        raise HTTPException(status_code=500, detail=str(e))
