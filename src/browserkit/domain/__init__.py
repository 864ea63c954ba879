"""
Domain Layer

Pure formatting logic: directive parsing, template compilation, field
resolution and dynamic styling. Nothing here touches a stream or a network.
"""
