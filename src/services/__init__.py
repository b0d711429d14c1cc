"""Service layer - business logic over the async session."""
