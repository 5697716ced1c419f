import sys
from typing import TextIO

from pydantic import ValidationError

from icejobs.env import Env, load_env
from icejobs.errors import TransportConfigError
from icejobs.logging import Logger, LoggingConfig
from icejobs.logging.icejobs_logging_models import MonitorFatal
from icejobs.monitor import (
    DiscoveryController,
    Fatal,
    IcejobsMonitor,
    MonitorOutcome,
    SessionEnded,
    StatsAggregator,
)
from icejobs.transport import Discovery, ReadinessWaiter, load_transport

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def configure_logging(env: Env):
    LoggingConfig().update(
        log_level=env.ICEJOBS_LOG_LEVEL,
        log_output=env.ICEJOBS_LOG_OUTPUT,
        logfile_path=env.ICEJOBS_LOG_FILE,
        disabled_loggers=env.get_disabled_loggers(),
    )


def create_monitor(
    env: Env,
    discovery: Discovery,
    logger: Logger,
) -> IcejobsMonitor:
    discovery_config = env.get_discovery_config()
    aggregator_config = env.get_aggregator_config()
    monitor_config = env.get_monitor_config()

    waiter = ReadinessWaiter(poll_interval=discovery_config['poll_interval'])

    discovery_controller = DiscoveryController(
        discovery,
        waiter=waiter,
        default_network_name=discovery_config['default_network_name'],
        override_network_name=discovery_config['override_network_name'],
        wait_timeout=discovery_config['wait_timeout'],
        logger=logger['discovery'],
    )

    aggregator = StatsAggregator(
        waiter=waiter,
        idle_deadline=aggregator_config['idle_deadline'],
        strict_parsing=aggregator_config['strict_parsing'],
        ignore_unhandled=aggregator_config['ignore_unhandled'],
        logger=logger['aggregator'],
    )

    return IcejobsMonitor(
        discovery_controller,
        aggregator,
        network_name=discovery_config['network_name'],
        login_retry_delay=monitor_config['login_retry_delay'],
        resume_on_connection_loss=monitor_config['resume_on_connection_loss'],
        logger=logger['monitor'],
    )


def report(outcome: MonitorOutcome, output: TextIO) -> int:
    """Write the total for a finished session and map the outcome to an exit status."""
    match outcome:
        case SessionEnded(total_jobs_available=total_jobs_available):
            output.write(f"{total_jobs_available}\n")
            output.flush()
            return EXIT_SUCCESS

        case Fatal():
            return EXIT_FAILURE

        case _:
            return EXIT_FAILURE


def icejobs(
    env: Env | None = None,
    discovery: Discovery | None = None,
    output: TextIO | None = None,
) -> int:
    """
    Print the total compile-job capacity advertised by all worker hosts of
    the first Icecream scheduler that answers.
    """
    if output is None:
        output = sys.stdout

    logger = Logger()

    if env is None:
        try:
            env = load_env(Env)

        except ValidationError as err:
            logger["icejobs"].log(
                MonitorFatal(
                    message="Invalid icejobs settings",
                    error=str(err),
                )
            )

            return EXIT_FAILURE

    configure_logging(env)

    try:
        if discovery is None:
            discovery = load_transport(env.ICEJOBS_TRANSPORT)

        monitor = create_monitor(env, discovery, logger)

        return report(monitor.run(), output)

    except TransportConfigError as err:
        logger['icejobs'].log(
            MonitorFatal(
                message=f"Scheduler transport unavailable: {err}",
                error=str(err),
            )
        )

        return EXIT_FAILURE

    finally:
        logger.close()


def run():
    try:
        sys.exit(icejobs())

    except KeyboardInterrupt:
        pass
