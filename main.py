#!/usr/bin/env python3
"""
Main application runner for the CV generator and Mysolution application submitter.
"""
import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence
from loguru import logger

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from config import ApiConfig, Settings, load_api_config, settings
from documents import lorem_ipsum_cv, missing_texts, render_cv
from applicators import (
    Applicant,
    ApplicationPayload,
    ApplicationSubmitter,
    DomainSweepRunner,
    FileEncoder,
    MysolutionError,
    SweepOutcome,
    TokenAcquirer,
    TrackingParameters,
    build_payload,
    is_error,
)

# Sample applicant used by the integration runs
TEST_APPLICANT = Applicant(
    email='test@example.com',
    first_name='John',
    middle_name='M',
    last_name='Doe',
    mobile_phone='0611223344',
    motivation='I am very interested in this position',
)

TEST_TRACKING = TrackingParameters(
    utm_campaign='test-campaign',
    utm_medium='test-medium',
    utm_source='test-source',
    utm_content='test-content',
    utm_term='test-term',
)


def setup_logging(app_settings: Optional[Settings] = None):
    """Setup logging configuration."""
    app_settings = app_settings or settings
    # Remove default logger
    logger.remove()

    # Add console logging
    logger.add(
        sys.stderr,
        level=app_settings.log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    # Add file logging
    log_file = Path(app_settings.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        level=app_settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="30 days"
    )


class ApplicationSystem:
    """One run of the application pipeline: a single token shared by every request."""

    def __init__(self, api_config: ApiConfig, app_settings: Optional[Settings] = None, session=None):
        app_settings = app_settings or settings
        self.api_config = api_config
        self.settings = app_settings
        self.session = session
        self.encoder = FileEncoder(app_settings.cv_fallback)
        self.token_acquirer = TokenAcquirer(
            api_config.base_url,
            api_config.client_id,
            api_config.client_secret,
            session=session,
            timeout=app_settings.request_timeout_secs,
        )
        self._submitter: Optional[ApplicationSubmitter] = None

    @property
    def submitter(self) -> ApplicationSubmitter:
        """Submitter bound to this run's token. Token failures raise here."""
        if self._submitter is None:
            logger.info("Getting authorization token...")
            token = self.token_acquirer.get_token()
            self._submitter = ApplicationSubmitter(
                self.api_config.base_url,
                token,
                session=self.session,
                timeout=self.settings.request_timeout_secs,
                log_file=self.settings.submission_log_file,
            )
        return self._submitter

    def build_payload(self) -> ApplicationPayload:
        """Fresh payload with the CV read from disk."""
        cv_path = Path(self.settings.cv_file_path)
        return build_payload(
            TEST_APPLICANT,
            self.encoder.encode(cv_path),
            cv_file_name=cv_path.name,
            set_api_name=self.settings.set_api_name,
            tracking=TEST_TRACKING,
            status='Application',
            is_external_source=False,
        )

    def submit(self, domain: Optional[str] = None, job_id: Optional[str] = None):
        job_id = job_id or self.api_config.job_id
        return self.submitter.submit(job_id, self.build_payload(), domain=domain)

    def sweep(self, domains: Optional[Sequence[str]] = None, job_id: Optional[str] = None) -> List[SweepOutcome]:
        runner = DomainSweepRunner(
            self.submitter,
            job_id or self.api_config.job_id,
            self.build_payload,
            self.settings.sweep_domains if domains is None else domains,
        )
        return runner.run()

    def show_configuration(self, set_api_name: str = "default"):
        return self.submitter.get_application_configuration(set_api_name)


def _api_config(args) -> ApiConfig:
    api_config = settings.api_config()
    if getattr(args, 'config', None):
        api_config = load_api_config(args.config, defaults=api_config)
    if getattr(args, 'job_id', None):
        api_config = api_config.model_copy(update={'job_id': args.job_id})
    return api_config.require_credentials()


def generate_cv(args) -> int:
    output = render_cv(args.output or settings.cv_output_path)
    print(f"CV written to {output}")

    if args.verify:
        missing = missing_texts(output, lorem_ipsum_cv())
        if missing:
            print("Missing from the rendered document:")
            for text in missing:
                print(f"  • {text}")
            return 1
        print("All sections present")
    return 0


def submit(args) -> int:
    system = ApplicationSystem(_api_config(args))
    result = system.submit(domain=args.domain)
    print(json.dumps(result, indent=2, default=str))
    return 1 if is_error(result) else 0


def sweep(args) -> int:
    system = ApplicationSystem(_api_config(args))
    outcomes = system.sweep(domains=args.domains)

    print("\n" + "=" * 60)
    print("DOMAIN SWEEP RESULTS")
    print("=" * 60)
    for outcome in outcomes:
        status = "OK" if outcome.succeeded else f"FAILED ({outcome.result.get('status')})"
        print(f"  {outcome.domain or 'EMPTY':<35} {status}")
    return 0


def show_configuration(args) -> int:
    system = ApplicationSystem(_api_config(args))
    result = system.show_configuration(args.set_api_name)
    print(json.dumps(result, indent=2, default=str))
    return 1 if is_error(result) else 0


def config_check(args) -> int:
    api_config = settings.api_config()
    print("Configuration Check:")
    print(f"Base URL: {api_config.base_url}")
    print(f"Client ID: {'✓ Set' if api_config.client_id else '✗ Missing'}")
    print(f"Client Secret: {'✓ Set' if api_config.client_secret else '✗ Missing'}")
    print(f"Job ID: {api_config.job_id or '✗ Missing'}")
    print(f"Application Set: {settings.set_api_name}")
    print(f"CV File: {settings.cv_file_path} ({'found' if Path(settings.cv_file_path).exists() else 'missing, placeholder will be sent'})")
    print(f"Sweep Domains: {', '.join(d or 'EMPTY' for d in settings.sweep_domains)}")

    for directory in (Path(settings.cv_output_path).parent, Path(settings.log_file).parent):
        directory.mkdir(parents=True, exist_ok=True)
        print(f"✓ Directory ready: {directory}")

    if not Path(".env").exists():
        print("\n⚠️  Configuration file .env not found; using environment variables and defaults")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a sample CV and submit test applications to the Mysolution API"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("generate-cv", help="Render the sample CV to PDF")
    p.add_argument("--output", help=f"Output path (default: {settings.cv_output_path})")
    p.add_argument("--verify", action="store_true", help="Check every section made it into the PDF")
    p.set_defaults(func=generate_cv)

    def add_api_arguments(p):
        p.add_argument("--config", help="JSON file with baseUrl, clientId, clientSecret, jobId")
        p.add_argument("--job-id", help="Job to apply for (overrides configuration)")

    p = subparsers.add_parser("submit", help="Submit one application")
    add_api_arguments(p)
    p.add_argument("--domain", default="", help="Optional domain query parameter")
    p.set_defaults(func=submit)

    p = subparsers.add_parser("sweep", help="Submit once per candidate domain")
    add_api_arguments(p)
    p.add_argument("--domains", nargs="*", help="Domains to try; use '' for no domain parameter")
    p.set_defaults(func=sweep)

    p = subparsers.add_parser("show-configuration", help="Fetch the job application configuration")
    add_api_arguments(p)
    p.add_argument("--set-api-name", default="default", help="Application set (default: default)")
    p.set_defaults(func=show_configuration)

    p = subparsers.add_parser("config-check", help="Check configuration and exit")
    p.set_defaults(func=config_check)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        return args.func(args)
    except MysolutionError as e:
        logger.error(f"Run aborted: {e}")
        print(f"\nFatal error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nProcess interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
