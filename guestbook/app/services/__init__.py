"""
Service layer.

``MessageService`` implements the read and write paths over a
``MessageStore``; ``RenderService`` turns a list of messages into the
HTML page.
"""
