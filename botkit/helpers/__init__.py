from .rich_reply import HTML_FORMAT, RichReply
