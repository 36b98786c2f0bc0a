"""Share link routes"""
from fastapi import APIRouter, Depends

from ...schemas import ShareRequest, ShareStatusResponse, SharedBrainResponse, ContentResponse
from ...services import ShareRegistry
from ..deps import get_current_user_id, get_share_registry

router = APIRouter()


@router.post("/share", response_model=ShareStatusResponse, response_model_exclude_none=True)
async def toggle_share(
    share_in: ShareRequest,
    user_id: str = Depends(get_current_user_id),
    registry: ShareRegistry = Depends(get_share_registry),
):
    """Turn the caller's public share link on or off"""
    if share_in.share:
        share_hash = await registry.enable(user_id)
        return ShareStatusResponse(message="Sharing enabled", hash=share_hash)

    await registry.disable(user_id)
    return ShareStatusResponse(message="Sharing disabled")


@router.get("/{share_link}", response_model=SharedBrainResponse)
async def get_shared_brain(
    share_link: str,
    registry: ShareRegistry = Depends(get_share_registry),
):
    """Public, unauthenticated view of a shared brain"""
    shared = await registry.resolve_public(share_link)
    return SharedBrainResponse(
        username=shared.username,
        content=[ContentResponse.model_validate(c) for c in shared.contents],
        shared_at=shared.shared_at,
    )
