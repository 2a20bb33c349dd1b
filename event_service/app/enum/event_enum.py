from enum import Enum


class EventVisibility(str, Enum):
    private = "Private"
    public = "Public"


class DiscussionMessageType(str, Enum):
    text = "text"
    image = "image"
    file = "file"
    link = "link"


class NotificationType(int, Enum):
    event = 1
    message = 2
    contact = 3
