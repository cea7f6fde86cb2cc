from pydantic import BaseModel, Field


class ListPaginationMeta(BaseModel):
    total: int
    count: int
    limit: int | None = None
    offset: int


class BulkDeleteRequest(BaseModel):
    ids: list[int] = Field(..., min_length=1)


class DeleteResponse(BaseModel):
    ok: bool = True
    deleted: int
    trace_id: str
