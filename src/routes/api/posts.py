"""
Post API routes for BlogWare.
Serves rendered posts by slug and the list of known posts.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger

from ...services.slug_resolver import SlugResolver
from ...utils.errors import NotFoundError

router = APIRouter()


def get_resolver(request: Request) -> SlugResolver:
    """Return the resolver built at application startup."""
    return request.app.state.resolver


@router.get("/blog")
async def list_posts(resolver: SlugResolver = Depends(get_resolver)):
    """List every post that can currently be served, newest first."""
    posts = await resolver.list_posts()
    return {"posts": [post.dict() for post in posts]}


@router.get("/blog/{slug}")
async def get_post(slug: str, resolver: SlugResolver = Depends(get_resolver)):
    """
    Get a rendered post by slug.

    Returns:
        dict: content, title and date of the post, or 404 if it cannot be served
    """
    try:
        data = await resolver.load({"params": {"slug": slug}})
    except NotFoundError as e:
        raise HTTPException(status_code=e.status, detail=e.message)

    logger.info(f"Post served: {slug}")
    return data
