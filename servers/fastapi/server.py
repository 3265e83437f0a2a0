import argparse

import uvicorn

from utils.get_env import get_host_env, get_port_env


def main():
    parser = argparse.ArgumentParser(description="Run the Slide Deck API server")
    parser.add_argument("--host", default=get_host_env(), help="Host to bind")
    parser.add_argument("--port", type=int, default=int(get_port_env()), help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
