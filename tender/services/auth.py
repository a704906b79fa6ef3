"""Authentication service for password handling and user lookup."""

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from tender.models.user import User, UserCuisine, UserDietary

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by id."""
    return db.query(User).filter(User.id == user_id).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def replace_dietary(user: User, labels: list[str]) -> None:
    """Replace the user's dietary restriction set, keeping rows for retained labels."""
    existing = {entry.dietary: entry for entry in user.dietary_entries}
    user.dietary_entries = [
        existing.get(label) or UserDietary(dietary=label) for label in dict.fromkeys(labels)
    ]


def replace_cuisines(user: User, cuisines: list[str]) -> None:
    """Replace the user's cuisine preference set."""
    normalized = (c.strip().lower() for c in cuisines if c and c.strip())
    existing = {entry.cuisine: entry for entry in user.cuisine_entries}
    user.cuisine_entries = [
        existing.get(c) or UserCuisine(cuisine=c) for c in dict.fromkeys(normalized)
    ]


def create_user(
    db: Session,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    cooking_skill: str | None = None,
    household_size: str | None = None,
    weekly_budget: str | None = None,
    meals_per_week: str | None = None,
    dietary: list[str] | None = None,
    cuisines: list[str] | None = None,
) -> User:
    """Create a new user with their preference sets."""
    user = User(
        email=normalize_email(email),
        password_hash=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        cooking_skill=cooking_skill or "intermediate",
        household_size=household_size or "2",
        weekly_budget=weekly_budget or "moderate",
        meals_per_week=meals_per_week or "4-7",
    )
    replace_dietary(user, dietary or [])
    replace_cuisines(user, cuisines or [])
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
