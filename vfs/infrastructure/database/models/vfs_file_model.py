# vfs/infrastructure/database/models/vfs_file_model.py

from datetime import datetime

from sqlalchemy import JSON, BigInteger, Boolean, DateTime, ForeignKey, Integer, Sequence, String, func
from sqlalchemy.orm import Mapped, mapped_column

from vfs.infrastructure.database.base_model import BaseModel

# ids are handed out before the insert (the id is part of the file name)
vfs_file_id_seq = Sequence("tbVfsFiles_id_seq")


class VfsFileModel(BaseModel):
    __tablename__ = "tbVfsFiles"

    id: Mapped[int] = mapped_column(BigInteger, vfs_file_id_seq, primary_key=True, autoincrement=False)

    folder_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("tbVfsFolders.id"), nullable=False
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    path: Mapped[str] = mapped_column(String(255), nullable=False)

    # {"width": .., "height": ..} for images
    params: Mapped[dict] = mapped_column(JSON, nullable=True)

    mime_type: Mapped[str] = mapped_column(String(255), nullable=False, server_default="")
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=True)
    file_exists: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="true")

    status_id: Mapped[int] = mapped_column(Integer, nullable=False, server_default="1")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
