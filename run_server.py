#!/usr/bin/env python3
"""Run the ipormac API server."""

import logging

import uvicorn


def main():
    logging.basicConfig(level=logging.INFO)
    print("Starting ipormac API server...")
    print("API documentation available at: http://localhost:8000/docs")
    uvicorn.run(
        "server.app:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )


if __name__ == "__main__":
    main()
