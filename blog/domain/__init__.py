from blog.domain.comments import Comment, Comments
from blog.domain.post import Post

__all__ = ["Comment", "Comments", "Post"]
