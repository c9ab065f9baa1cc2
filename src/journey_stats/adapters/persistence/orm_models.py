"""SQLAlchemy mappings of the journey store tables."""

from datetime import datetime

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class JourneyRecord(Base):
    """A stored journey owned by one user."""

    __tablename__ = "journey"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column("userId", String(64), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)  # minutes
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False
    )

    sections: Mapped[list["SectionRecord"]] = relationship(
        back_populates="journey",
        order_by="SectionRecord.order",
        cascade="all, delete-orphan",
    )

    __table_args__ = (Index("ix_journey_user_created", "userId", "createdAt"),)

    def __repr__(self) -> str:
        return f"<JourneyRecord {self.uuid} user={self.user_id}>"


class SectionRecord(Base):
    """A leg of a journey."""

    __tablename__ = "section"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    journey_uuid: Mapped[str] = mapped_column(
        "journeyUuid", ForeignKey("journey.uuid", ondelete="CASCADE"), nullable=False, index=True
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)  # travel order within the journey

    journey: Mapped[JourneyRecord] = relationship(back_populates="sections")
    passes: Mapped[list["PassRecord"]] = relationship(
        back_populates="section",
        order_by="PassRecord.order",
        cascade="all, delete-orphan",
    )


class PassRecord(Base):
    """A station pass within a section."""

    __tablename__ = "pass"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_id: Mapped[int] = mapped_column(
        "sectionId", ForeignKey("section.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False)
    station_id: Mapped[str | None] = mapped_column("stationId", String(64), nullable=True)
    station_name: Mapped[str] = mapped_column("stationName", String(255), nullable=False)
    station_coordinate_x: Mapped[float | None] = mapped_column(
        "stationCoordinateX", Float, nullable=True
    )
    station_coordinate_y: Mapped[float | None] = mapped_column(
        "stationCoordinateY", Float, nullable=True
    )

    section: Mapped[SectionRecord] = relationship(back_populates="passes")
