from .user_profile import UserProfile, UserProfileJSON
from .user_post import UserPost, UserPostJSON
from .post import Post, PostJSON
