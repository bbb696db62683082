"""Row-to-model plumbing shared by the Supabase repositories"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from supabase import Client

ModelT = TypeVar('ModelT', bound=BaseModel)
CreateT = TypeVar('CreateT', bound=BaseModel)
UpdateT = TypeVar('UpdateT', bound=BaseModel)

Row = Dict[str, Any]


class BaseRepository(Generic[ModelT, CreateT, UpdateT]):
    """
    Keyed access to a single table.

    Rows come back from PostgREST as plain dicts and leave as pydantic
    models; payloads are written in JSON mode so dates and enums serialize
    as strings. Lookups are by the string primary key ``id``.
    """

    def __init__(self, client: Client, table_name: str, model_class: Type[ModelT]):
        self._client = client
        self._table_name = table_name
        self._model_class = model_class

    def _table(self):
        return self._client.table(self._table_name)

    def _to_model(self, row: Row) -> ModelT:
        return self._model_class(**row)

    def _to_models(self, rows: Optional[List[Row]]) -> List[ModelT]:
        return [self._to_model(row) for row in rows or []]

    def _first(self, response) -> Optional[ModelT]:
        """Model for the first returned row, None when nothing matched"""
        rows = response.data or []
        return self._to_model(rows[0]) if rows else None

    @staticmethod
    def _payload(data: BaseModel) -> Row:
        # Only fields the caller actually set are written
        return data.model_dump(mode='json', exclude_unset=True)

    async def find_by_id(self, id: str) -> Optional[ModelT]:
        return self._first(self._table().select("*").eq("id", id).execute())

    async def create(self, data: CreateT) -> ModelT:
        """
        Insert a row and return it as stored (with its generated id).

        Raises:
            ValueError: If the store returned no row
        """
        created = self._first(self._table().insert(self._payload(data)).execute())
        if created is None:
            raise ValueError(f"Insert into '{self._table_name}' returned no row")
        return created

    async def update(self, id: str, data: UpdateT) -> Optional[ModelT]:
        """
        Patch the set fields of a row.

        An empty patch is a plain read. Returns None when no row has the id.
        """
        payload = self._payload(data)
        if not payload:
            return await self.find_by_id(id)
        return self._first(self._table().update(payload).eq("id", id).execute())

    async def delete(self, id: str) -> bool:
        """True if a row was removed"""
        response = self._table().delete().eq("id", id).execute()
        return bool(response.data)
