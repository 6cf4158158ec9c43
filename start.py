#!/usr/bin/env python3
"""
Startup script for the Military Welfare Portal API
"""
import subprocess
import sys
from pathlib import Path


def create_env_file():
    """Create .env file if it doesn't exist"""
    env_path = Path(".env")
    if not env_path.exists():
        print("📝 Creating .env file...")

        env_content = """# MongoDB Configuration
MONGODB_URL=mongodb://localhost:27017
MONGODB_DB_NAME=military_welfare_db

# Application Configuration
APP_NAME=Military Welfare Portal API
APP_VERSION=1.0.0
DEBUG=false
LOG_LEVEL=INFO

# Server Configuration
HOST=0.0.0.0
PORT=5000
CORS_ORIGINS=*

# Security
BCRYPT_ROUNDS=10

# Sample data
SEED_INITIAL_DATA=true
"""

        with open(env_path, 'w') as f:
            f.write(env_content)

        print("✅ .env file created successfully!")
    else:
        print("✅ .env file already exists")


def check_dependencies():
    """Check if required dependencies are installed"""
    print("🔍 Checking dependencies...")

    try:
        import fastapi
        import uvicorn
        import motor
        import bcrypt
        import pydantic_settings
        print("✅ All Python dependencies are installed")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("📦 Please install dependencies using: pip install -e .")
        return False


def start_application():
    """Start the FastAPI application"""
    from welfare_api.config import settings

    print(f"🚀 Backend server listening on port {settings.port}")
    print(f"   Access at http://localhost:{settings.port}")
    print("--- API Endpoints ---")
    print("  Auth: POST /api/register, POST /api/login")
    print("  Schemes: GET /api/schemes, POST /api/schemes, DELETE /api/schemes/{id}")
    print("  Grievances: GET /api/grievances, POST /api/grievances, PATCH /api/grievances/{id}/status")
    print("  Marketplace: GET /api/marketplace, POST /api/marketplace, PATCH /api/marketplace/{id}, DELETE /api/marketplace/{id}")
    print("  Applications: GET /api/applications, POST /api/applications")
    print("  Emergency Contacts: GET /api/users/{userId}/emergency-contacts, POST /api/emergency-contacts, "
          "PATCH /api/emergency-contacts/{id}, DELETE /api/emergency-contacts/{id}")

    try:
        subprocess.run([
            sys.executable, '-m', 'uvicorn',
            'welfare_api.main:app',
            '--host', settings.host,
            '--port', str(settings.port)
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped by user")


def main():
    """Main startup function"""
    print("🎖️  Military Welfare Portal API")
    print("=" * 50)

    if not Path("welfare_api").exists():
        print("❌ Please run this script from the project root directory")
        sys.exit(1)

    create_env_file()

    if not check_dependencies():
        sys.exit(1)

    start_application()


if __name__ == "__main__":
    main()
