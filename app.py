"""Tech Docs — Entry Point.

Serves platform schemas, workflow documents and microservice READMEs
rendered from markdown.  Port defaults to 3000 (override with PORT).

Run:
    python app.py
"""

import config
from techdocs import create_app

application = create_app()

if __name__ == "__main__":
    application.run(
        host=config.HOST,
        port=config.PORT,
        debug=False,
    )
