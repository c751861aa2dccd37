from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from blog.database import get_db
from blog.domain import Post
from blog.presenters import PostPresenter, present_comments
from blog.schemas import CommentCreate, CommentResponse, PostCreate, PostResponse
from blog.services import comment_service, post_service

# No version segment in the path: response shapes are held stable by the
# presenters instead.
router = APIRouter(prefix="/posts", tags=["posts"])

@router.post("", status_code=201, response_model=PostResponse)
async def create_post(data: PostCreate, db: AsyncSession = Depends(get_db)):
    return await post_service.create_post(db, data)

@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await PostPresenter(Post(id=post_id, db=db)).as_json()
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post

@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: AsyncSession = Depends(get_db)):
    post = Post(id=post_id, db=db)
    if not await post.exists():
        raise HTTPException(status_code=404, detail="Post not found")
    return await present_comments(post)

@router.post("/{post_id}/comments", status_code=201, response_model=CommentResponse)
async def add_comment(post_id: int, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    comment = await comment_service.add_comment(db, post_id, data)
    if comment is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return comment
