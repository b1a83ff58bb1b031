"""botkit Events Module.

The model of conversation history exposed by a Matrix server can be considered
as a list of events. Events arrive as loosely structured JSON, the classes in
this module wrap them and give their content a typed shape without ever
rejecting what the server sent.
"""

from .room_events import *
