"""
Command-line front end for browsing the platform.

Examples:
  airate --seed models                          # leaderboard by average rating
  airate --seed models --sort review_count      # most reviewed first
  airate --seed models --category "Text Generation"
  airate --seed reviews --model 1 --limit 5
  airate --seed stats
"""

import argparse
import sys
from typing import Dict, List, Optional

from colorama import init, Fore, Style

from .platform import ReviewPlatform
from .repositories.model_repository import SORT_KEYS


def _stars(value: float) -> str:
    full = int(round(value))
    return '★' * full + '☆' * (5 - full)


def print_models(models: List[Dict]) -> None:
    if not models:
        print(f"{Fore.YELLOW}No models found.")
        return
    for rank, model in enumerate(models, 1):
        print(f"{Fore.CYAN}{Style.BRIGHT}{rank:>2}. {model['name']}"
              f"{Style.RESET_ALL} {Fore.WHITE}({model['category']})")
        print(f"    {Fore.YELLOW}{_stars(model['avg_rating'])} "
              f"{model['avg_rating']:.2f}{Style.RESET_ALL}"
              f"  reviews: {model['review_count']}"
              f"  accuracy: {model['accuracy_score']:.1f}"
              f"  ease of use: {model['ease_of_use_score']:.1f}"
              f"  innovation: {model['innovation_score']:.1f}")


def print_reviews(reviews: List[Dict]) -> None:
    if not reviews:
        print(f"{Fore.YELLOW}No reviews found.")
        return
    for review in reviews:
        print(f"{Fore.GREEN}#{review['id']} {Style.BRIGHT}{review['title']}"
              f"{Style.RESET_ALL} {Fore.YELLOW}{_stars(review['rating'])}")
        print(f"    model {review['model_id']}, user {review['user_id']}, "
              f"{review['helpful_votes']} helpful votes")
        print(f"    {review['content']}")


def print_news(articles: List[Dict]) -> None:
    if not articles:
        print(f"{Fore.YELLOW}No news articles found.")
        return
    for article in articles:
        print(f"{Fore.MAGENTA}[{article['category']}] {Style.BRIGHT}{article['title']}")
        print(f"    {article['summary']}")


def print_rewards(rewards: List[Dict]) -> None:
    if not rewards:
        print(f"{Fore.YELLOW}No rewards found.")
        return
    for reward in rewards:
        colour = Fore.GREEN if reward['is_available'] else Fore.RED
        print(f"{colour}{reward['points_cost']:>6} pts{Style.RESET_ALL}  "
              f"{Style.BRIGHT}{reward['name']}{Style.RESET_ALL} - {reward['description']}")


def print_stats(stats: Dict) -> None:
    print(f"{Fore.GREEN}{'=' * 40}")
    print(f"{Fore.CYAN}{Style.BRIGHT}Platform statistics")
    print(f"{Fore.GREEN}{'=' * 40}")
    print(f"  Models:          {stats['model_count']}")
    print(f"  Reviews:         {stats['review_count']}")
    print(f"  Users:           {stats['user_count']}")
    print(f"  Rewards claimed: {stats['rewards_claimed']}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='airate',
        description='AIRate - AI model reviews, ratings and rewards',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split('\n', 2)[2],
    )
    parser.add_argument(
        '--config', '-c',
        default=None,
        help='Path to a JSON config file (optional)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Load the demo catalog before running the command'
    )
    parser.add_argument(
        '--log-level',
        default=None,
        help='Override the configured log level (DEBUG, INFO, ...)'
    )

    sub = parser.add_subparsers(dest='command', required=True)

    models = sub.add_parser('models', help='List models')
    models.add_argument('--category', default=None,
                        help='Only show models in this category')
    models.add_argument('--sort', default='avg_rating', choices=SORT_KEYS,
                        help='Sort order (default: avg_rating)')

    reviews = sub.add_parser('reviews', help='List reviews, newest first')
    reviews.add_argument('--model', type=int, default=None,
                         help='Only show reviews of this model id')
    reviews.add_argument('--limit', type=int, default=10,
                         help='Maximum number of reviews (default: 10)')

    news = sub.add_parser('news', help='List news articles, newest first')
    news.add_argument('--limit', type=int, default=10,
                      help='Maximum number of articles (default: 10)')

    sub.add_parser('rewards', help='List rewards')
    sub.add_parser('stats', help='Show platform statistics')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    init(autoreset=True)
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.seed:
        overrides['seed_demo_data'] = True
    if args.log_level:
        overrides['log_level'] = args.log_level

    platform = ReviewPlatform(args.config, config=overrides)
    try:
        if args.command == 'models':
            print_models(platform.model_service.list(category=args.category,
                                                     sort_by=args.sort))
        elif args.command == 'reviews':
            print_reviews(platform.review_service.list(model_id=args.model,
                                                       limit=args.limit))
        elif args.command == 'news':
            print_news(platform.news_service.list(limit=args.limit))
        elif args.command == 'rewards':
            print_rewards(platform.reward_service.list())
        elif args.command == 'stats':
            print_stats(platform.stats_service.get_stats())
    finally:
        platform.close()
    return 0


if __name__ == '__main__':
    sys.exit(main())
