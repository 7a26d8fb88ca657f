import threading
import webbrowser

import uvicorn

from backend.config import Settings
from backend.main import create_app


def open_browser_once(url: str):
    print(f"[server] Opening {url}")
    try:
        webbrowser.open(url)
    except webbrowser.Error as exc:
        print(f"[server] Could not open a browser: {exc}")


def main():
    settings = Settings.from_env()
    url = f"http://{settings.host}:{settings.port}/"

    if settings.open_browser:
        # give uvicorn a moment to boot before opening the browser
        threading.Timer(1.0, open_browser_once, args=(url,)).start()

    print(f"[server] Serving links from {settings.data_dir}. Press Ctrl+C to quit.")
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    print("[server] Shut down.")


if __name__ == "__main__":
    main()
