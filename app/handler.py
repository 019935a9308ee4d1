# =============================================================================
# app/handler.py - AWS Lambda Entry Point
# =============================================================================
# Runs the FastAPI app behind API Gateway / Lambda function URLs.
# The lifespan is off: every invocation is self-contained.
#
# Lambda handler setting: app.handler.handler
# =============================================================================

from mangum import Mangum

from app.main import app

handler = Mangum(app, lifespan="off")
