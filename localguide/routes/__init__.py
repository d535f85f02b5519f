"""
FastAPI routers for all API endpoints.

Routes stay thin: validate the request body, call the service layer, and
map the result onto the response model.
"""
