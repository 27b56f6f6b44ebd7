"""API Routes - one router module per resource collection, plus health."""
