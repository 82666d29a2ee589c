from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

class DataProvider(ABC):
    """Base interface for all CRUD data providers.

    Every operation is a coroutine returning an envelope with a 'data' key.
    """

    @abstractmethod
    async def list_many(self, resource: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Fetch a filtered, sorted, paginated list of records."""
        pass

    @abstractmethod
    async def get_one(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Fetch a single record by params['id']."""
        pass

    @abstractmethod
    async def create_one(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a record."""
        pass

    @abstractmethod
    async def update_one(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Partially update the record identified by data['id']."""
        pass

    @abstractmethod
    async def update_many(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Partially update the collection."""
        pass

    @abstractmethod
    async def delete_one(self, resource: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """Delete the record identified by params['id']."""
        pass

    async def get_many(self, resource: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Alias of list_many."""
        return await self.list_many(resource, params)
