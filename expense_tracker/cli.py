import argparse
import json

import uvicorn


def main(argv=None):
    parser = argparse.ArgumentParser(prog="expense-tracker")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument(
        "--export-openapi",
        metavar="PATH",
        help="write the OpenAPI document to PATH and exit",
    )
    args = parser.parse_args(argv)

    if args.export_openapi:
        from expense_tracker.main import app

        with open(args.export_openapi, "w") as f:
            json.dump(app.openapi(), f, indent=2)
        print("OpenAPI JSON exported successfully.")
        return

    uvicorn.run("expense_tracker.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
