"""DocAccess: accessibility enhancement stage for document conversion."""
