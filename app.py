from config import load_settings

from src.school_attendance.school_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    settings = load_settings()
    app.run(host="0.0.0.0", port=int(getattr(settings, "PORT", 5000)), debug=bool(getattr(settings, "DEBUG", False)))
