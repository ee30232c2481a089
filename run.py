"""Entrypoint: start the server via app.server.serve()."""
from app.server import serve

if __name__ == "__main__":
    serve()
