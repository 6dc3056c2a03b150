"""Endpoint paths, relative to ``Settings.api_base_url``."""

# Cursored listings
FRIENDS_LIST = "/1.1/friends/list.json"
FRIENDS_IDS = "/1.1/friends/ids.json"
FOLLOWERS_LIST = "/1.1/followers/list.json"
FOLLOWERS_IDS = "/1.1/followers/ids.json"
BLOCKS_LIST = "/1.1/blocks/list.json"
BLOCKS_IDS = "/1.1/blocks/ids.json"
MUTES_LIST = "/1.1/mutes/users/list.json"
MUTES_IDS = "/1.1/mutes/users/ids.json"
FRIENDSHIPS_INCOMING = "/1.1/friendships/incoming.json"
FRIENDSHIPS_OUTGOING = "/1.1/friendships/outgoing.json"

# Offset-paginated search
SEARCH = "/1.1/users/search.json"

# Single-shot lookups and updates
LOOKUP = "/1.1/users/lookup.json"
SHOW = "/1.1/users/show.json"
FRIENDSHIP_SHOW = "/1.1/friendships/show.json"
FRIENDSHIP_LOOKUP = "/1.1/friendships/lookup.json"
FOLLOW = "/1.1/friendships/create.json"
UNFOLLOW = "/1.1/friendships/destroy.json"
FRIENDSHIP_UPDATE = "/1.1/friendships/update.json"
FRIENDS_NO_RETWEETS = "/1.1/friendships/no_retweets/ids.json"
