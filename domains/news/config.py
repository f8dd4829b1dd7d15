"""News domain configuration."""

import os

from .models import SourceDescriptor, SourceKind

CHANNEL_ID = int(os.getenv("NEWS_CHANNEL_ID", "1320852592447848592"))  # #news-updates

SOURCES = [
    SourceDescriptor("The Verge", "http://theverge.com/rss/index.xml", SourceKind.FEED),
    SourceDescriptor("MIT Tech Review AI", "https://www.technologyreview.com/feed", SourceKind.FEED),
    SourceDescriptor("TechCrunch AI", "https://techcrunch.com/feed/", SourceKind.FEED),
    SourceDescriptor("404 Media", "https://www.404media.co/rss/", SourceKind.FEED),
    SourceDescriptor("Wired", "https://www.wired.com/feed/rss", SourceKind.FEED),
    SourceDescriptor("NBC News", "https://www.nbcnews.com/feed", SourceKind.FEED),
    SourceDescriptor("Fast Company", "https://www.fastcompany.com/rss", SourceKind.FEED),
    SourceDescriptor("Creative Applications", "https://www.creativeapplications.net/feed", SourceKind.FEED),
    SourceDescriptor("Nvidia", "https://blogs.nvidia.com/feed/", SourceKind.FEED),
    SourceDescriptor("Creative Bloq", "https://www.creativebloq.com/feeds.xml", SourceKind.FEED),
    SourceDescriptor("ars technica", "https://arstechnica.com/feed", SourceKind.FEED),
    SourceDescriptor("The Next Web", "https://thenextweb.com/feed", SourceKind.FEED),
    SourceDescriptor("CDM", "https://cdm.link/category/motion/feed/", SourceKind.FEED),
    SourceDescriptor("The Gradient", "https://thegradient.pub/rss/", SourceKind.FEED),
    SourceDescriptor("RunwayML", "https://runwayml.com/news", SourceKind.PAGE),
]

# Collection
RECENCY_DAYS = 3
FEED_TIMEOUT = 30
PAGE_TIMEOUT = 10
PAGE_SELECTOR = "article a, h2 a"
MAX_LINKS_PER_PAGE = 5

# Placeholder summaries
NO_SUMMARY = "No summary available."
SUMMARY_PENDING = "Summary will be generated."
SUMMARY_UNAVAILABLE = "Summary unavailable."
SUMMARY_MAX_CHARS = 280

# Selection
RANK_CANDIDATE_LIMIT = 10
TOP_N = 3

# Publishing
DISCORD_MESSAGE_LIMIT = 2000
POST_INTERVAL_SECONDS = 20

# Matched as case-insensitive substrings of title + summary
POLITICAL_KEYWORDS = [
    "politics", "government", "policy", "election", "war", "conflict", "activism",
    "senate", "congress", "president", "minister", "law", "protest", "rights", "bills",
    "diplomacy", "sanctions", "military", "parliament", "legislation", "censorship",
]

# Matched as whole words/phrases, plural allowed, in title or summary
TOPIC_KEYWORDS = [
    "ai", "genai", "openai", "artificial intelligence", "creative technology", "creative innovation",
]

SUMMARIZE_PROMPT = """Summarize this article in only 1-2 sentences, strictly focusing on AI, creativity, and technological innovation.
Do NOT include anything related to politics, government policies, elections, war, activism, or social justice topics.
Keep it concise, under 280 characters."""

RANK_PROMPT = """You are an AI assistant ranking the top articles on generative AI, creative technology, and creative innovation.
Completely ignore political relevance.
Focus only on advancements in generative and creative AI, media and entertainment, immersive experiences, design innovation, and technology-driven creativity."""
