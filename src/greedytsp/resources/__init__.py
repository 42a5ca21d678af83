from pathlib import Path

res_path = Path(__file__).parent
