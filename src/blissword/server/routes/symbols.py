"""
Symbol routes: /api/symbols
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from blissword.core.codec import Alphabet, decode, detect_alphabet, encode
from blissword.core.decompose import decompose
from blissword.core.errors import CyclicComposition, UnknownIdentifier
from blissword.core.roles import is_indicator, is_modifier
from blissword.core.search import find_by_gloss, find_compositions_using
from blissword.core.symbols import normalize
from blissword.core.tables import SymbolTables
from blissword.server.deps import get_tables


router = APIRouter(prefix="/api/symbols", tags=["symbols"])


class SymbolRequest(BaseModel):
    symbol: int | list[int | str]


class EncodeRequest(SymbolRequest):
    alphabet: Alphabet = Alphabet.BLISSARY


class DecodeRequest(BaseModel):
    text: str
    alphabet: Alphabet | Literal["auto"] = Alphabet.BLISSARY


@router.post("/encode")
async def encode_symbol(req: EncodeRequest, tables: SymbolTables = Depends(get_tables)):
    """Spell a symbol as a builder string."""
    try:
        text = encode(normalize(req.symbol), tables.id_map, req.alphabet)
    except UnknownIdentifier as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"text": text, "alphabet": req.alphabet}


@router.post("/decode")
async def decode_symbol(req: DecodeRequest, tables: SymbolTables = Depends(get_tables)):
    """Parse a builder string. An empty symbol means the text could not be read."""
    alphabet = detect_alphabet(req.text) if req.alphabet == "auto" else req.alphabet
    symbol = decode(req.text, alphabet, tables.id_map)
    return {"symbol": symbol, "alphabet": alphabet, "ok": bool(symbol)}


@router.post("/decompose")
async def decompose_symbol(req: SymbolRequest, tables: SymbolTables = Depends(get_tables)):
    """Expand a symbol into elementary IDs. null when an ID is unknown."""
    try:
        symbol = decompose(normalize(req.symbol), tables.dictionary)
    except CyclicComposition as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"symbol": symbol}


@router.get("/search")
async def search_gloss(gloss: str, tables: SymbolTables = Depends(get_tables)):
    """Find symbols by gloss word."""
    matches = find_by_gloss(gloss, tables.dictionary)
    return {"matches": [m.to_dict() for m in matches]}


@router.get("/{bci_av_id}")
async def get_symbol(bci_av_id: int, tables: SymbolTables = Depends(get_tables)):
    """Dictionary entry and role of a symbol."""
    entry = tables.dictionary.get(bci_av_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Symbol not found")
    return {
        **entry.to_dict(),
        "builder_code": tables.id_map.spelling(bci_av_id),
        "is_indicator": is_indicator(bci_av_id),
        "is_modifier": is_modifier(bci_av_id),
    }


@router.get("/{bci_av_id}/used-by")
async def get_compositions_using(bci_av_id: int, tables: SymbolTables = Depends(get_tables)):
    """Symbols whose composition contains this ID."""
    matches = find_compositions_using(bci_av_id, tables.dictionary)
    return {"matches": [m.to_dict() for m in matches]}


@router.get("/{bci_av_id}/role")
async def get_role(bci_av_id: int):
    """Indicator / modifier classification. Works for IDs outside the dictionary."""
    return {
        "id": bci_av_id,
        "is_indicator": is_indicator(bci_av_id),
        "is_modifier": is_modifier(bci_av_id),
    }
