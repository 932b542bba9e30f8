# app/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, event, func
from sqlalchemy.orm import relationship
from app.database import Base
from app.utils.security import hash_password

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    tasks = relationship("Task", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User id={self.id} email={self.email!r}>"


@event.listens_for(User, "before_insert")
def hash_password_before_insert(mapper, connection, target: User):
    """Store only the bcrypt hash, never the submitted plaintext"""
    target.password = hash_password(target.password)
