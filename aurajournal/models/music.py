from sqlalchemy import Column, DateTime, Enum, Integer, String

from aurajournal.db.database import Base
from aurajournal.models.enums import Mood
from aurajournal.utils.timeutils import utcnow


class MusicRecommendation(Base):
    __tablename__ = "music_recommendations"

    id = Column(Integer, primary_key=True)

    mood = Column(
        Enum(Mood, name="mood_enum", native_enum=False, length=20),
        nullable=False,
        index=True,
    )
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False)
    genre = Column(String, nullable=False)

    spotify_url = Column(String, nullable=True)
    youtube_url = Column(String, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)


# Seeded at store init
DEFAULT_MUSIC = [
    {"mood": Mood.happy, "title": "Good 4 U", "artist": "Olivia Rodrigo", "genre": "Pop",
     "spotify_url": "https://open.spotify.com/track/4ZtFanR9U6ndgddUvNcjcG",
     "youtube_url": "https://www.youtube.com/watch?v=gNi_6U5Pm_o"},
    {"mood": Mood.happy, "title": "Uptown Funk", "artist": "Mark Ronson ft. Bruno Mars", "genre": "Funk",
     "spotify_url": "https://open.spotify.com/track/32OlwWuMpZ6b0aN2RZOeMS",
     "youtube_url": "https://www.youtube.com/watch?v=OPf0YbXqDm0"},
    {"mood": Mood.calm, "title": "Weightless", "artist": "Marconi Union", "genre": "Ambient",
     "spotify_url": None,
     "youtube_url": "https://www.youtube.com/watch?v=UfcAVejslrU"},
    {"mood": Mood.calm, "title": "River", "artist": "Joni Mitchell", "genre": "Folk",
     "spotify_url": "https://open.spotify.com/track/3mAJkMqS2z3UCOoYJm7btc",
     "youtube_url": "https://www.youtube.com/watch?v=3NH-ctddY9o"},
    {"mood": Mood.sad, "title": "Someone Like You", "artist": "Adele", "genre": "Ballad",
     "spotify_url": "https://open.spotify.com/track/1zwMYTA5nlNjZxYrvBB2pV",
     "youtube_url": "https://www.youtube.com/watch?v=hLQl3WQQoQ0"},
    {"mood": Mood.sad, "title": "The Sound of Silence", "artist": "Simon & Garfunkel", "genre": "Folk",
     "spotify_url": "https://open.spotify.com/track/5AEDGEhgESYFNdKpn2TJJx",
     "youtube_url": "https://www.youtube.com/watch?v=4fWyzwo1xg0"},
    {"mood": Mood.excited, "title": "Can't Stop the Feeling!", "artist": "Justin Timberlake", "genre": "Pop",
     "spotify_url": "https://open.spotify.com/track/6RUKPb4LETWmmr3iAEQktW",
     "youtube_url": "https://www.youtube.com/watch?v=ru0K8uYEZWw"},
    {"mood": Mood.excited, "title": "High Hopes", "artist": "Panic! At The Disco", "genre": "Pop Rock",
     "spotify_url": "https://open.spotify.com/track/1rqqCSm0Qe4I9rUvWncaom",
     "youtube_url": "https://www.youtube.com/watch?v=IPXIgEAGe4U"},
    {"mood": Mood.anxious, "title": "Breathe", "artist": "Télépopmusik", "genre": "Electronic",
     "spotify_url": "https://open.spotify.com/track/4zS6iFTFmYvI6qGJc0FtUr",
     "youtube_url": "https://www.youtube.com/watch?v=vyut3GyQtn0"},
    {"mood": Mood.anxious, "title": "Mad World", "artist": "Gary Jules", "genre": "Alternative",
     "spotify_url": "https://open.spotify.com/track/3JOVTQ5h8HGFnDdp4VT3MP",
     "youtube_url": "https://www.youtube.com/watch?v=4N3N1MlvVc4"},
]
