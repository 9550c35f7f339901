"""Music API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.music_api.api.http.deps import get_music_service, get_page_request
from src.music_api.core.services import MusicPage, MusicService, PageRequest
from src.music_api.entities.service.music import Music

router = APIRouter(prefix="/musics", tags=["musics"])


@router.get("", response_model=MusicPage)
def list_musics(
    page_request: PageRequest = Depends(get_page_request),
    service: MusicService = Depends(get_music_service),
) -> MusicPage:
    """List non-deleted musics, one zero-based page at a time."""
    return service.list_musics(page_request)


@router.get("/{music_id}", response_model=Music)
def get_music(
    music_id: int,
    service: MusicService = Depends(get_music_service),
) -> Music:
    """Get a music by ID."""
    return service.get_music(music_id)


@router.post("", response_model=Music, status_code=status.HTTP_201_CREATED)
def create_music(
    music: Music,
    service: MusicService = Depends(get_music_service),
) -> Music:
    """Create a new music."""
    return service.create_music(music)


@router.put("/{music_id}", response_model=list[int])
def update_music(
    music_id: int,
    music: Music,
    service: MusicService = Depends(get_music_service),
) -> list[int]:
    """Update a music; the body is the affected-row count, e.g. ``[1]``."""
    return service.update_music(music_id, music)


@router.delete("/{music_id}")
def delete_music(
    music_id: int,
    service: MusicService = Depends(get_music_service),
) -> dict[str, str]:
    """Logically delete a music."""
    service.delete_music(music_id)
    return {"message": "Music deleted successfully"}
