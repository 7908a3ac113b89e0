"""
Edit buffer routes: /api/buffer

Every route returns the buffer snapshot after the operation, with the gating
flags a palette needs to enable or disable its buttons.
"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from blissword.core import buffer as ops
from blissword.core.errors import CyclicComposition
from blissword.core.inflect import Inflector
from blissword.core.store import BufferStore
from blissword.core.symbols import normalize
from blissword.core.tables import SymbolTables
from blissword.server.deps import get_buffer_store, get_inflector, get_tables


router = APIRouter(prefix="/api/buffer", tags=["buffer"])


class AppendRequest(BaseModel):
    id: str
    gloss: str
    symbol: int | list[int | str]
    decompose: bool = True


class IndicatorRequest(BaseModel):
    indicator_id: int
    source_id: str = ""


class ModifierRequest(BaseModel):
    symbol: int | list[int | str]
    gloss: str
    prepend: bool = False
    source_id: str = ""


def snapshot(buffer: ops.EditBuffer) -> dict:
    return {**buffer.to_dict(), **ops.gating(buffer)}


@router.get("")
async def get_buffer(store: BufferStore = Depends(get_buffer_store)):
    """Current buffer."""
    return snapshot(store.get())


@router.post("/append")
async def append_item(
    req: AppendRequest,
    store: BufferStore = Depends(get_buffer_store),
    tables: SymbolTables = Depends(get_tables),
):
    """Append a symbol and select it."""
    dictionary = tables.dictionary if req.decompose else None
    try:
        buffer = store.apply(ops.append, req.id, req.gloss, normalize(req.symbol), dictionary)
    except CyclicComposition as e:
        raise HTTPException(status_code=422, detail=str(e))
    return snapshot(buffer)


@router.post("/caret/backward")
async def caret_backward(store: BufferStore = Depends(get_buffer_store)):
    return snapshot(store.apply(ops.move_caret_backward))


@router.post("/caret/forward")
async def caret_forward(store: BufferStore = Depends(get_buffer_store)):
    return snapshot(store.apply(ops.move_caret_forward))


@router.post("/delete")
async def delete_item(store: BufferStore = Depends(get_buffer_store)):
    """Delete the selected item (the last one when nothing is selected)."""
    return snapshot(store.apply(ops.delete_at_caret))


@router.post("/clear")
async def clear_buffer(store: BufferStore = Depends(get_buffer_store)):
    return snapshot(store.apply(ops.clear_all))


@router.post("/indicator")
async def add_indicator(
    req: IndicatorRequest,
    store: BufferStore = Depends(get_buffer_store),
    inflector: Inflector = Depends(get_inflector),
):
    """Add an indicator to the selected item, replacing any it has."""
    buffer = store.apply(ops.add_or_replace_indicator, req.indicator_id, req.source_id, inflector)
    return snapshot(buffer)


@router.post("/indicator/remove")
async def remove_indicator(
    store: BufferStore = Depends(get_buffer_store),
    inflector: Inflector = Depends(get_inflector),
):
    return snapshot(store.apply(ops.remove_indicator, inflector))


@router.post("/modifier")
async def add_modifier(req: ModifierRequest, store: BufferStore = Depends(get_buffer_store)):
    """Prepend or append a modifier to the selected item."""
    buffer = store.apply(ops.add_modifier, normalize(req.symbol), req.gloss, req.prepend, req.source_id)
    return snapshot(buffer)


@router.post("/modifier/remove")
async def remove_modifier(store: BufferStore = Depends(get_buffer_store)):
    """Undo the most recent modifier on the selected item."""
    return snapshot(store.apply(ops.remove_last_modifier))
