def to_unicode(text):
    """
    Decodes UTF-8 bytes, anything else is returned as it is.
    """
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8")
    return text
