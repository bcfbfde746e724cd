from typing import Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware

import blogmark
from blogmark import Document, Format, MediaReference, ValidationError
from blogmark.config import DEFAULT_CONFIG

app = FastAPI(title="Blog Draft Markup API")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _document(text: str, fmt: str) -> Document:
    if len(text.encode("utf-8")) > DEFAULT_CONFIG.MAX_INPUT_FILE_SIZE:
        raise HTTPException(status_code=413, detail="Document too large")
    try:
        return Document(text=text, format=Format.parse(fmt))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _blocks_payload(blocks):
    return [{"index": b.index, "label": b.label, "text": b.text} for b in blocks]


@app.post("/api/convert")
def convert_document(
    text: str = Form(""),
    source_format: str = Form("markdown"),
    target_format: str = Form("html"),
    attribution_hint: Optional[str] = Form(None),
):
    document = _document(text, source_format)
    try:
        converted = blogmark.convert(document, Format.parse(target_format), attribution_hint)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"text": converted.text, "format": converted.format.value}


@app.post("/api/segment")
def segment_document(
    text: str = Form(""),
    format: str = Form("markdown"),
):
    document = _document(text, format)
    return {"blocks": _blocks_payload(blogmark.segment(document))}


@app.post("/api/insert")
def insert_image(
    text: str = Form(""),
    format: str = Form("markdown"),
    block_index: int = Form(...),
    address: str = Form(""),
    attribution: str = Form(""),
):
    document = _document(text, format)
    media_ref = MediaReference(address=address, attribution=attribution)
    try:
        updated = blogmark.plan_insertion(
            blogmark.segment(document), block_index, media_ref, document.format
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "text": updated.text,
        "format": updated.format.value,
        "blocks": _blocks_payload(blogmark.segment(updated)),
    }


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
