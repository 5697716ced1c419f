from .root import icejobs as icejobs
from .root import run as run
