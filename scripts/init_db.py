"""按 ORM 模型建表（users / classrooms / quizzes / tests / q_assignments / questions / topics / missions / videos）。
与应用使用同一 DATABASE_URL（会从项目根目录 .env 加载环境变量）。
使用方式（在项目根目录）：
  python scripts/init_db.py
  python scripts/init_db.py --drop   # 先删除全部表再重建（会丢数据）
"""
import argparse
import os
import sys

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _project_root)
os.chdir(_project_root)

_env_file = os.path.join(_project_root, ".env")
if os.path.isfile(_env_file):
    with open(_env_file, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and "=" in line and not line.startswith("#"):
                k, _, v = line.partition("=")
                k, v = k.strip(), v.strip()
                if k and os.environ.get(k) is None:
                    os.environ[k] = v

from sqlalchemy import create_engine

from app.core.config import settings
from app.models import Base


def _sync_database_url(url: str) -> str:
    """转为同步驱动 URL（psycopg2），建表脚本不需要异步。"""
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql+psycopg2://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg2://", 1)
    if url.startswith("sqlite+aiosqlite://"):
        return url.replace("sqlite+aiosqlite://", "sqlite://", 1)
    return url


def _redact_url(url: str) -> str:
    if "@" in url and "//" in url:
        pre, _, rest = url.partition("//")
        if "@" in rest:
            user_part, _, host_part = rest.rpartition("@")
            if ":" in user_part:
                user = user_part.split(":")[0]
                return f"{pre}//{user}:****@{host_part}"
    return url


def main():
    parser = argparse.ArgumentParser(description="Create database tables")
    parser.add_argument("--drop", action="store_true", help="drop all tables first")
    args = parser.parse_args()

    sync_url = _sync_database_url(settings.database_url)
    engine = create_engine(sync_url)
    print(f"Using DB: {_redact_url(sync_url)}")

    if args.drop:
        Base.metadata.drop_all(engine)
        print("Dropped all tables.")
    Base.metadata.create_all(engine)
    print("Created tables: " + ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    main()
