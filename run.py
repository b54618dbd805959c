#!/usr/bin/env python3
"""
Startup script for the Stocks API.
This script checks the environment and starts the FastAPI server.
"""

import os
import sys

from dotenv import load_dotenv


def check_environment():
    """Check if the environment is properly configured."""
    load_dotenv()

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        print("❌ DATABASE_URL is not set!")
        print("\nPlease set your database URL:")
        print("1. Copy env.example to .env")
        print("2. Edit .env and set DATABASE_URL")
        print("3. Run 'alembic upgrade head' to create the stocks table")
        print("4. Run this script again")
        return False

    print("✅ Environment is properly configured")
    return True


def main():
    """Main function to start the API server."""
    print("🚀 Starting Stocks API Server")
    print("=" * 40)

    # Check environment
    if not check_environment():
        sys.exit(1)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))

    # Import and run the app
    try:
        import uvicorn

        from app import app

        print("✅ All dependencies loaded successfully")
        print(f"🌐 Starting server at http://localhost:{port}")
        print(f"📚 API documentation: http://localhost:{port}/docs")
        print("🛑 Press Ctrl+C to stop the server")
        print("=" * 40)

        uvicorn.run(app, host=host, port=port)

    except ImportError as e:
        print(f"❌ Failed to import dependencies: {e}")
        print("\nPlease install dependencies:")
        print("pip install -e .")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
