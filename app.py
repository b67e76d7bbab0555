"""Serve the datafmt formatting API with uvicorn (PORT env, default 9195)."""
import os
import uvicorn

from datafmt.api.app import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", 9195)))
