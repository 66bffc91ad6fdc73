from pathlib import Path

from fasthtml.common import serve

from oopshowcase import ShowcaseConfig, create_app

config = ShowcaseConfig.from_env(pages_dir=Path(__file__).parent / "pages",
                                static_dir=Path(__file__).parent / "assets")
app = create_app(config)


if __name__ == "__main__":
    print("\n" + "="*60)
    print("Practical Exercises starting on http://%s:%d" % (config.host, config.port))
    print("="*60)

    serve(host=config.host, port=config.port, reload=config.live)
