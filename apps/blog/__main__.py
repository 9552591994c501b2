"""Run the Blog API with uvicorn: python -m apps.blog"""
import os

import uvicorn

from apps.blog.main import app

if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
