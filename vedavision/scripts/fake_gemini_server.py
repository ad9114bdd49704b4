"""
Fake Gemini server for testing GeminiVision without an API key or network.

Serves POST /v1beta/models/<model>:generateContent on port 9100 and replies
with a canned structured result. The reply depends on FAKE_GEMINI_MODE:
  neem       identified Neem (default)
  uncertain  identified=false, confidenceScore=20
  empty      no candidates (processing error)
  error      HTTP 500

Usage:
    python vedavision/scripts/fake_gemini_server.py                     (terminal 1)
    GEMINI_BASE_URL=http://localhost:9100/v1beta GEMINI_API_KEY=fake \
        uvicorn vedavision.web.app:app --port 8000                      (terminal 2)
"""

import json
import os
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vedavision.adapters.vision.mock_vision import NEEM

app = FastAPI(title="fake-gemini-server")

MODE = os.getenv("FAKE_GEMINI_MODE", "neem")
DELAY_S = float(os.getenv("FAKE_GEMINI_DELAY_S", "3"))


def _reply(result: dict) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": json.dumps(result)}], "role": "model"}}]}


@app.post("/v1beta/models/{model_action}")
async def generate_content(model_action: str, request: Request):
    body = await request.json()
    parts = body["contents"][0]["parts"]
    mime = parts[0]["inlineData"]["mimeType"]
    temp = body.get("generationConfig", {}).get("temperature")
    print(f"[gemini] {model_action} mime={mime} temperature={temp} mode={MODE} — thinking {DELAY_S:.1f}s ...")
    time.sleep(DELAY_S)

    if MODE == "error":
        return JSONResponse({"error": {"code": 500, "message": "fake failure"}}, status_code=500)
    if MODE == "empty":
        return {"candidates": []}
    if MODE == "uncertain":
        return _reply({"identified": False, "confidenceScore": 20})
    return _reply(NEEM)


if __name__ == "__main__":
    print(f"Fake Gemini server starting on http://localhost:9100 (mode={MODE})")
    uvicorn.run(app, host="0.0.0.0", port=9100)
