"""botkit Event Builders Module.

This module provides classes to easily create event dictionaries that
can be sent with the client's ``room_put_state()`` method.
"""

from .event_builder import EventBuilder
from .state_events import *
