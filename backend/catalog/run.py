# Copyright 2025 Antimortine
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Development entrypoint for the Game Catalog HTTP API."""

import argparse

import uvicorn

from catalog.core.config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Game Catalog API server")
    parser.add_argument("--host", default=settings.HOST, help="Host interface to bind")
    parser.add_argument("--port", type=int, default=settings.PORT, help="TCP port to listen on")
    parser.add_argument("--reload", action="store_true", help="Enable autoreload (dev mode)")
    args = parser.parse_args()

    uvicorn.run("catalog.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
