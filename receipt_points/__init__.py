"""
Receipt points service.

Accepts receipts over HTTP, keeps them in memory and awards loyalty points
per receipt. Run with::

    uvicorn receipt_points.main:app --port 8080
"""
