from enum import Enum

class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"

class TokenIssuer(str, Enum):
    access = "chirpy-access"
    refresh = "chirpy-refresh"

class WebhookEvent(str, Enum):
    user_upgraded = "user.upgraded"
