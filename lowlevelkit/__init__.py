"""Small systems tools: prime factors, image blur, a todo HTTP API, TCP demos, object reports and binutils wrappers."""

__version__ = "0.1.0"