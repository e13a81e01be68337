"""
Demo catalog used by ``seed_demo_data`` and the CLI's ``--seed`` flag.

Everything goes through the public services, so seeded reviews trigger the
same aggregation and point credits as real ones.
"""

import logging

logger = logging.getLogger('airate.seed')

DEMO_USERS = [
    {"username": "alexjohnson", "password": "password123", "name": "Alex Johnson",
     "email": "alex@example.com",
     "avatar": "https://images.unsplash.com/photo-1535713875002-d1d0cf377fde?auto=format&fit=crop&q=80&w=100"},
    {"username": "sarahmiller", "password": "password123", "name": "Sarah Miller",
     "email": "sarah@example.com",
     "avatar": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&q=80&w=100"},
]

DEMO_MODELS = [
    {"name": "GPT-4", "category": "Text Generation",
     "description": "Advanced natural language processing model by OpenAI that can "
                    "understand and generate human-like text.",
     "image_url": "https://images.unsplash.com/photo-1673299293952-5b8e1558dc3d?auto=format&fit=crop&q=80&w=600"},
    {"name": "Midjourney", "category": "Image Generation",
     "description": "AI-powered text-to-image generator that creates stunning artwork "
                    "and visual content from text descriptions.",
     "image_url": "https://images.unsplash.com/photo-1679958157985-8a93c00e731c?auto=format&fit=crop&q=80&w=600"},
    {"name": "Claude", "category": "Text Generation",
     "description": "AI assistant by Anthropic designed to be helpful, harmless, and "
                    "honest in its responses to complex queries.",
     "image_url": "https://images.unsplash.com/photo-1684391962108-ab2d561846a4?auto=format&fit=crop&q=80&w=600"},
]

# user/model are indexes into DEMO_USERS / DEMO_MODELS
DEMO_REVIEWS = [
    {"user": 0, "model": 0, "title": "Revolutionized my workflow completely",
     "content": "GPT-4 has significantly improved my content creation process. It helps "
                "me draft articles, brainstorm ideas, and even debug code much faster "
                "than before.",
     "rating": 5, "accuracy_rating": 5, "ease_of_use_rating": 4, "innovation_rating": 5},
    {"user": 1, "model": 1, "title": "Amazing creative tool with a learning curve",
     "content": "Midjourney creates stunning images that I use for my design projects. "
                "The quality is incredible but mastering the prompts takes time.",
     "rating": 4, "accuracy_rating": 4, "ease_of_use_rating": 3, "innovation_rating": 5},
]

DEMO_NEWS = [
    {"title": "Breakthrough in AI Training Reduces Computational Requirements by 70%",
     "category": "RESEARCH",
     "content": "Researchers have developed a new methodology that significantly reduces "
                "the computational resources needed for training large language models.",
     "summary": "A new training methodology cuts the compute needed for AI model training.",
     "image_url": "https://images.unsplash.com/photo-1655720036434-905bf347e58a?auto=format&fit=crop&q=80&w=600"},
    {"title": "EU Announces New AI Regulatory Framework", "category": "REGULATION",
     "content": "The European Union has unveiled a comprehensive framework for regulating "
                "artificial intelligence, focusing on transparency, ethics, and safety.",
     "summary": "The EU revealed a framework for regulating AI, focusing on transparency "
                "and ethics.",
     "image_url": "https://images.unsplash.com/photo-1684391962108-ab2d561846a4?auto=format&fit=crop&q=80&w=600"},
    {"title": "OpenAI Releases GPT-4o with Enhanced Multimodal Capabilities",
     "category": "PRODUCT LAUNCH",
     "content": "OpenAI has released GPT-4o, featuring improved image understanding, audio "
                "processing, and faster response times.",
     "summary": "GPT-4o brings improved image understanding, audio processing and speed.",
     "image_url": "https://images.unsplash.com/photo-1677442136019-21780acdf692?auto=format&fit=crop&q=80&w=600"},
]

DEMO_REWARDS = [
    {"name": "AI Conference Ticket Discount",
     "description": "Get 50% off on tickets to the Annual AI Innovation Summit",
     "points_cost": 1000, "image_url": "https://example.com/reward1.jpg", "is_available": True},
    {"name": "Premium AI Model Access",
     "description": "One month free access to premium features of top AI models",
     "points_cost": 750, "image_url": "https://example.com/reward2.jpg", "is_available": True},
]


def seed_demo_data(platform) -> None:
    """Populate *platform* with the demo catalog.

    Users whose username already exists are reused rather than re-created.
    """
    users = []
    for data in DEMO_USERS:
        user = platform.user_service.get_by_username(data['username'])
        users.append(user or platform.user_service.register(data))

    models = [platform.model_service.create(data) for data in DEMO_MODELS]

    for data in DEMO_REVIEWS:
        review = {k: v for k, v in data.items() if k not in ('user', 'model')}
        review['user_id'] = users[data['user']]['id']
        review['model_id'] = models[data['model']]['id']
        platform.review_service.create(review)

    # DEMO_NEWS is ordered oldest first
    for data in DEMO_NEWS:
        platform.news_service.create(data)
    for data in DEMO_REWARDS:
        platform.reward_service.create(data)

    logger.info("Seeded %d users, %d models, %d reviews, %d news, %d rewards",
                len(users), len(models), len(DEMO_REVIEWS), len(DEMO_NEWS),
                len(DEMO_REWARDS))
