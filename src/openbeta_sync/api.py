"""Typesense REST client."""

import json
from typing import Any

import requests
from loguru import logger
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from openbeta_sync.config import CONNECTION_TIMEOUT_SECONDS, NUM_RETRIES, Settings
from openbeta_sync.errors import ApiError, ImportFailed, ObjectNotFound


class TypesenseApi:
    """Minimal typesense client covering collection and import endpoints."""

    def __init__(self, settings: Settings) -> None:
        self.base_url = settings.typesense_url
        self.timeout = CONNECTION_TIMEOUT_SECONDS
        self.sess = requests.Session()
        self.sess.headers.update({"X-TYPESENSE-API-KEY": settings.typesense_api_key})

        retry = Retry(
            total=NUM_RETRIES,
            backoff_factor=1.0,
            status_forcelist=(500, 502, 503, 504),
            allowed_methods=None,
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        self.sess.mount("http://", adapter)
        self.sess.mount("https://", adapter)

        logger.debug("Typesense API ready: {}", self.base_url)

    def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: Any = None,
        data: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Invoke a typesense endpoint, raising ApiError on failure."""
        url = f"{self.base_url}{path}"
        logger.debug("Making request: {} {}", method, path)
        try:
            r = self.sess.request(
                method,
                url,
                params=params,
                json=json_body,
                data=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            msg = f"Request failed: {method} {path}: {e}"
            raise ApiError(msg) from e

        if r.status_code == 404:
            msg = f"Not found: {method} {path}: {_error_message(r)}"
            raise ObjectNotFound(msg, status_code=404)
        if not r.ok:
            msg = f"API call failed: {method} {path} -> ({r.status_code}, {_error_message(r)!r})"
            raise ApiError(msg, status_code=r.status_code)
        return r

    def close(self) -> None:
        self.sess.close()

    def delete_collection(self, name: str) -> dict[str, Any]:
        return self.call("DELETE", f"/collections/{name}").json()  # type: ignore[no-any-return]

    def create_collection(self, schema: dict[str, Any]) -> dict[str, Any]:
        return self.call("POST", "/collections", json_body=schema).json()  # type: ignore[no-any-return]

    def import_documents(
        self,
        name: str,
        documents: list[dict[str, Any]],
        *,
        action: str = "create",
    ) -> list[dict[str, Any]]:
        """Bulk-import documents as JSON lines.

        Returns:
            One result object per document.

        Raises:
            ImportFailed: If the server rejected any of the documents.
            ApiError: If the response body is not one JSON object per line.
        """
        body = "\n".join(json.dumps(doc) for doc in documents)
        r = self.call(
            "POST",
            f"/collections/{name}/documents/import",
            params={"action": action},
            data=body.encode("utf-8"),
            headers={"Content-Type": "text/plain"},
        )
        try:
            results: list[dict[str, Any]] = [
                json.loads(line) for line in r.text.splitlines() if line.strip()
            ]
        except ValueError as e:
            msg = f"Malformed import response for {name!r}: {r.text[:64]!r}"
            raise ApiError(msg, status_code=r.status_code) from e
        if not all(isinstance(res, dict) for res in results):
            msg = f"Malformed import response for {name!r}: {r.text[:64]!r}"
            raise ApiError(msg, status_code=r.status_code)
        failures = [res for res in results if not res.get("success")]
        if failures:
            msg = (
                f"{len(failures)} of {len(documents)} documents failed to import "
                f"into {name!r}, first error: {failures[0].get('error')!r}"
            )
            raise ImportFailed(msg, failures=failures)
        return results


def _error_message(r: requests.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return r.text
    if isinstance(data, dict) and "message" in data:
        return str(data["message"])
    return r.text
