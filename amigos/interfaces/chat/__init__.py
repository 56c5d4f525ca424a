"""Remote procedures of the chat bounded context."""
