from slowapi import Limiter
from slowapi.util import get_remote_address

# One limiter for every router so app.state.limiter governs them all
limiter = Limiter(key_func=get_remote_address)
