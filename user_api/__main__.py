"""Run the API: python -m user_api"""
from user_api.main import run

if __name__ == "__main__":
    run()
