"""
Async HTTP client for the Adventurer's Book API.

One method per endpoint, responses parsed into the API's pydantic models.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .adventurer.schemas import (
    AdventurerResponse,
    AdventurerListResponse,
    AdventurerDeleteResponse,
    ExperienceUpdateResult,
    MentorAssignmentResponse,
    GuidanceSessionResponse,
)

logger = logging.getLogger("adventurers-book.client")


class APIError(Exception):
    """Base exception for API errors."""
    def __init__(self, message: str, status_code: int | None = None, response: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class NotFoundError(APIError):
    """Resource not found (404)."""
    pass


class ValidationError(APIError):
    """Request validation failed (422)."""
    pass


class AdventurersAPIClient:
    """Base async HTTP client for the Adventurer's Book API."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        params: dict | None = None,
        json: dict | None = None,
    ) -> Any:
        """Make an HTTP request and handle errors."""
        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        try:
            response = await client.request(method=method, url=url, params=params, json=json)
        except httpx.RequestError as e:
            logger.error(f"HTTP request failed: {e}")
            raise APIError(f"Request failed: {e}") from e

        if response.status_code == 204 or not response.content:
            if response.status_code >= 400:
                raise APIError(f"API error {response.status_code}", status_code=response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            if response.status_code < 400:
                raise APIError(f"Invalid JSON in response from {url}", status_code=response.status_code)
            data = {"detail": response.text}

        if response.status_code == 404:
            raise NotFoundError(f"Resource not found: {url}", status_code=404, response=data)
        if response.status_code == 422:
            raise ValidationError(
                f"Validation error: {data.get('detail', 'Unknown error')}",
                status_code=422,
                response=data,
            )
        if response.status_code >= 400:
            raise APIError(
                f"API error {response.status_code}: {data.get('detail', 'Unknown error')}",
                status_code=response.status_code,
                response=data,
            )
        return data


class AdventurersClient(AdventurersAPIClient):
    """Client for the /adventurers resource."""

    async def create(
        self,
        name: str,
        proficiencies: list[str] | None = None,
        level: int = 1,
        experience_points: int = 0,
    ) -> AdventurerResponse:
        """Create a new adventurer with initial attributes."""
        data = {
            "name": name,
            "proficiencies": proficiencies or [],
            "level": level,
            "experience_points": experience_points,
        }
        response = await self._request("POST", "/adventurers/", json=data)
        return AdventurerResponse.model_validate(response)

    async def retrieve(self, adventurer_id: str) -> AdventurerResponse:
        """Retrieve an adventurer by their ID."""
        response = await self._request("GET", f"/adventurers/{adventurer_id}")
        return AdventurerResponse.model_validate(response)

    async def update(
        self,
        adventurer_id: str,
        name: str | None = None,
        level: int | None = None,
        experience_points: int | None = None,
        proficiencies: list[str] | None = None,
    ) -> AdventurerResponse:
        """Update an adventurer's attributes. Only the given fields are sent."""
        data = {
            key: value
            for key, value in {
                "name": name,
                "level": level,
                "experience_points": experience_points,
                "proficiencies": proficiencies,
            }.items()
            if value is not None
        }
        response = await self._request("PATCH", f"/adventurers/{adventurer_id}", json=data)
        return AdventurerResponse.model_validate(response)

    async def list(self, skip: int = 0, limit: int = 100) -> AdventurerListResponse:
        """List all adventurers."""
        response = await self._request("GET", "/adventurers/", params={"skip": skip, "limit": limit})
        return AdventurerListResponse.model_validate(response)

    async def delete(self, adventurer_id: str) -> AdventurerDeleteResponse:
        """Delete an adventurer."""
        response = await self._request("DELETE", f"/adventurers/{adventurer_id}")
        return AdventurerDeleteResponse.model_validate(response)

    async def add_experience(
        self,
        adventurer_id: str,
        experience_points: int,
        target_proficiencies: list[str] | None = None,
        reason: str | None = None,
    ) -> ExperienceUpdateResult:
        """Add experience points to an adventurer, which may trigger level ups."""
        data: dict[str, Any] = {"experience_points": experience_points}
        if target_proficiencies is not None:
            data["target_proficiencies"] = target_proficiencies
        if reason is not None:
            data["reason"] = reason
        response = await self._request("POST", f"/adventurers/{adventurer_id}/experience", json=data)
        return ExperienceUpdateResult.model_validate(response)

    async def assign_mentor(self, adventurer_id: str, mentor_id: str) -> MentorAssignmentResponse:
        """Assign a mentor to an adventurer."""
        response = await self._request(
            "POST",
            f"/adventurers/{adventurer_id}/mentor",
            json={"mentor_id": mentor_id},
        )
        return MentorAssignmentResponse.model_validate(response)

    async def record_guidance_session(
        self,
        adventurer_id: str,
        session_type: str,
        duration_minutes: int,
        notes: str | None = None,
        skills_focused: list[str] | None = None,
        experience_points: int | None = None,
    ) -> GuidanceSessionResponse:
        """Record a guidance session with the adventurer's mentor."""
        data: dict[str, Any] = {
            "session_type": session_type,
            "duration_minutes": duration_minutes,
            "skills_focused": skills_focused or [],
        }
        if notes is not None:
            data["notes"] = notes
        if experience_points is not None:
            data["experience_points"] = experience_points
        response = await self._request("POST", f"/adventurers/{adventurer_id}/guidance", json=data)
        return GuidanceSessionResponse.model_validate(response)
