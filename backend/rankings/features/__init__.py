"""Feature modules (models, repositories, services) grouped by domain."""
