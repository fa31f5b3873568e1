"""AWS Lambda handler using Mangum adapter."""

from mangum import Mangum

from campus.app_setup import add_root_endpoint
from campus.application import create_app
from campus.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app()

# Add root endpoint
add_root_endpoint(app)

# Configure as lambda handler
lambda_handler = Mangum(app)
