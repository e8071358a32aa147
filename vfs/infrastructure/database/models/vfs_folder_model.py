# vfs/infrastructure/database/models/vfs_folder_model.py

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from vfs.infrastructure.database.base_model import BaseModel


class VfsFolderModel(BaseModel):
    __tablename__ = "tbVfsFolders"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)

    parent_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("tbVfsFolders.id"), nullable=True
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    status_id: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")
