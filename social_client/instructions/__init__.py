from .init import init, InitArgs, InitAccounts
from .follow import follow, FollowArgs, FollowAccounts
from .unfollow import unfollow, UnfollowArgs, UnfollowAccounts
from .query_follows import query_follows, QueryFollowsAccounts
from .post import post, PostArgs, PostAccounts
from .query_posts import query_posts, QueryPostsAccounts
