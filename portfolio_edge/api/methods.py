# File: portfolio_edge/api/methods.py

# Every route answers all of these the same way; the method is never inspected.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
