# /run.py

import subprocess
import threading
import os
import sys

from app.config import API_HOST, API_PORT, UI_PORT

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def run_fastapi():
  subprocess.run([sys.executable, "-m", "uvicorn", "app.main:app", "--host", API_HOST, "--port", str(API_PORT)], cwd=BASE_DIR)

def run_streamlit():
  subprocess.run([sys.executable, "-m", "streamlit", "run", "app/ui.py", "--server.port", str(UI_PORT), "--server.address", "0.0.0.0"], cwd=BASE_DIR)


if __name__ == "__main__":

  t1 = threading.Thread(target=run_fastapi)
  t2 = threading.Thread(target=run_streamlit)

  t1.start()
  t2.start()

  t1.join()
  t2.join()
