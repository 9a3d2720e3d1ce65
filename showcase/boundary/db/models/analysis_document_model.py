"""
Analysis document ORM model.

One row per analysed image, keyed by the uploaded filename. Rows are
written by the external vision pipeline once it finishes with an object;
this application only reads them.

Dependencies: sqlalchemy, showcase.boundary.db.base
System role: Analysis result persistence
"""

from datetime import datetime

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from showcase.boundary.db.base import Base


class AnalysisDocumentModel(Base):
    """
    Analysis document ORM model.

    Existence of a row is the only completion signal: absent means the
    pipeline has not finished (or failed silently), present means processed.

    Attributes:
        id: Primary key, equal to the uploaded filename
        file_name: S3 object key of the analysed image
        detected_labels: Ordered label strings from the vision model
        dominant_colors: Ordered list of {red, green, blue} objects (0-255)
        processed_timestamp: When the pipeline wrote the result (UTC)
    """

    __tablename__ = "images"

    id: Mapped[str] = mapped_column(
        String(1024),
        primary_key=True,
        doc="Uploaded filename, also the S3 object key",
    )

    file_name: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="S3 object key for the image",
    )

    detected_labels: Mapped[list[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    dominant_colors: Mapped[list[dict]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    processed_timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
