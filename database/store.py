"""
Remote document store and blob store boundary.

DocumentStore is the narrow interface the seeders depend on. AppwriteStore
implements it against the Appwrite REST API; tests substitute an
in-memory implementation.
"""

import json
import logging
from typing import Any, Protocol

import httpx
from pydantic import BaseModel, ConfigDict, Field

from shared.config import StoreConfig
from shared.errors import StoreError
from shared.image_security import validate_magic_number, validate_url
from shared.logging_config import truncate_message

logger = logging.getLogger(__name__)

# Sentinel asking the store to generate the identifier
UNIQUE_ID = "unique()"


class Document(BaseModel):
    """A stored document; payload fields are kept as extras."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="$id")

    @property
    def data(self) -> dict[str, Any]:
        """Payload fields without the store's `$` metadata."""
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if not key.startswith("$")
        }

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


class StoredFile(BaseModel):
    """A file record in the blob store."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="$id")
    name: str = ""
    mime_type: str | None = Field(default=None, alias="mimeType")
    size: int | None = Field(default=None, alias="sizeOriginal")


class FileDescriptor(BaseModel):
    """
    What to upload: the source uri plus the declared file metadata.

    `size` is the declared estimate. AppwriteStore uploads the fetched bytes,
    so the stored size is the fetched content length.
    """

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    content_type: str
    size: int


class Query:
    """Builders for store query strings (JSON query syntax)."""

    @staticmethod
    def limit(limit: int) -> str:
        """Cap the number of records a listing returns."""
        return json.dumps({"method": "limit", "values": [limit]})


class DocumentStore(Protocol):
    """Operations the seeding engine needs from the remote store."""

    async def list_documents(
        self, database_id: str, collection_id: str, queries: list[str] | None = None
    ) -> list[Document]: ...

    async def create_document(
        self, database_id: str, collection_id: str, document_id: str, data: dict[str, Any]
    ) -> Document: ...

    async def delete_document(
        self, database_id: str, collection_id: str, document_id: str
    ) -> None: ...

    async def list_files(
        self, bucket_id: str, queries: list[str] | None = None
    ) -> list[StoredFile]: ...

    async def create_file(
        self, bucket_id: str, file_id: str, file: FileDescriptor
    ) -> StoredFile: ...

    async def delete_file(self, bucket_id: str, file_id: str) -> None: ...

    def get_file_view_url(self, bucket_id: str, file_id: str) -> str: ...


class AppwriteStore:
    """
    DocumentStore over the Appwrite REST API.

    One httpx.AsyncClient is shared by all calls; open it with
    `async with AppwriteStore(config)` or database.connection.get_store().
    """

    def __init__(self, config: StoreConfig, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config
        self.base_url = config.endpoint.rstrip("/")
        self.headers = {
            "X-Appwrite-Project": config.project_id,
            "X-Appwrite-Response-Format": "1.5.0",
        }
        if config.api_key:
            self.headers["X-Appwrite-Key"] = config.api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        # Source fetches go to third-party hosts and must not carry the API key
        self._fetch_client: httpx.AsyncClient | None = None

        logger.info(f"AppwriteStore initialized: {self.base_url}, project={config.project_id}")

    async def __aenter__(self) -> "AppwriteStore":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.config.timeout_seconds,
            transport=self._transport,
        )
        self._fetch_client = httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            transport=self._transport,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        for client in (self._client, self._fetch_client):
            if client is not None:
                await client.aclose()
        self._client = None
        self._fetch_client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("AppwriteStore used outside of its async context")
        return self._client

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request; any HTTP or transport failure becomes StoreError."""
        client = client or self.client
        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            detail = truncate_message(e.response.text)
            logger.error(f"HTTP error during {operation}: {e.response.status_code} {detail}")
            raise StoreError(operation, detail, e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error during {operation}: {e}")
            raise StoreError(operation, str(e) or type(e).__name__) from e

    def _documents_path(self, database_id: str, collection_id: str) -> str:
        return f"/databases/{database_id}/collections/{collection_id}/documents"

    async def list_documents(
        self, database_id: str, collection_id: str, queries: list[str] | None = None
    ) -> list[Document]:
        response = await self._request(
            "list_documents",
            "GET",
            self._documents_path(database_id, collection_id),
            params={"queries[]": queries or []},
        )
        return [Document.model_validate(doc) for doc in response.json().get("documents", [])]

    async def create_document(
        self, database_id: str, collection_id: str, document_id: str, data: dict[str, Any]
    ) -> Document:
        response = await self._request(
            "create_document",
            "POST",
            self._documents_path(database_id, collection_id),
            json={"documentId": document_id, "data": data},
        )
        return Document.model_validate(response.json())

    async def delete_document(self, database_id: str, collection_id: str, document_id: str) -> None:
        await self._request(
            "delete_document",
            "DELETE",
            f"{self._documents_path(database_id, collection_id)}/{document_id}",
        )

    async def list_files(self, bucket_id: str, queries: list[str] | None = None) -> list[StoredFile]:
        response = await self._request(
            "list_files",
            "GET",
            f"/storage/buckets/{bucket_id}/files",
            params={"queries[]": queries or []},
        )
        return [StoredFile.model_validate(f) for f in response.json().get("files", [])]

    async def create_file(self, bucket_id: str, file_id: str, file: FileDescriptor) -> StoredFile:
        """
        Fetch the descriptor's uri and upload it as a new file.

        The upload carries the fetched bytes; `file.size` is not sent.

        Raises:
            ImageSecurityError: If the uri or fetched content fails the checks
            StoreError: If fetching or uploading fails
        """
        validate_url(file.uri)
        if self._fetch_client is None:
            raise RuntimeError("AppwriteStore used outside of its async context")
        source = await self._request("fetch_file_source", "GET", file.uri, client=self._fetch_client)
        content = source.content
        validate_magic_number(content, declared_mime=file.content_type)

        response = await self._request(
            "create_file",
            "POST",
            f"/storage/buckets/{bucket_id}/files",
            data={"fileId": file_id},
            files={"file": (file.name, content, file.content_type)},
        )
        return StoredFile.model_validate(response.json())

    async def delete_file(self, bucket_id: str, file_id: str) -> None:
        await self._request("delete_file", "DELETE", f"/storage/buckets/{bucket_id}/files/{file_id}")

    def get_file_view_url(self, bucket_id: str, file_id: str) -> str:
        url = httpx.URL(
            f"{self.base_url}/storage/buckets/{bucket_id}/files/{file_id}/view",
            params={"project": self.config.project_id},
        )
        return str(url)
