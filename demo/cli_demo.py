#!/usr/bin/env python3
"""
Interactive CLI demo for the media resolver.

Type a request such as "Telugu horror movies" and get a short reply plus
up to five catalog matches.
"""
import logging
import sys

from media_resolver.app import MediaResolverApp
from media_resolver.config_loader import load_config_from_env
from media_resolver.exceptions import ConfigurationError


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Media Resolver - Interactive CLI Demo")
    print("=" * 60)
    print("\nAsk me for movies or shows! Try:")
    print("  • Telugu horror movies")
    print("  • Best TV shows")
    print("  • Movies like Inception")
    print("  • trending")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_reply(reply):
    """Print formatted reply."""
    print(f"\n💬 {reply.text}")

    for item in reply.items:
        year = f" ({item.year})" if item.year else ""
        tag = " [tv]" if item.media_type else ""
        print(f"   🎬 {item.title}{year} ⭐ {item.rating}{tag}")

    print("-" * 60)


def setup_resolver() -> MediaResolverApp:
    """Load configuration and initialize the resolver."""
    print("🚀 Initializing media resolver...")
    config = load_config_from_env()

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    resolver = MediaResolverApp(config)
    resolver.initialize()
    print("✅ Ready!\n")
    return resolver


def main():
    """Main CLI loop."""
    print_banner()

    try:
        resolver = setup_resolver()
    except ConfigurationError as e:
        print(f"\n❌ Failed to initialize resolver: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    while True:
        try:
            query = input("You: ").strip()

            if not query:
                continue

            if query.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Thanks for using the media resolver! Goodbye!\n")
                break

            print_reply(resolver.resolve_blocking(query))

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
