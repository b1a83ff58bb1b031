from .api import Api
from .client import *
from .event_builders import *
from .events import *
from .exceptions import *
from .helpers import RichReply
from .unstable_apis import *
