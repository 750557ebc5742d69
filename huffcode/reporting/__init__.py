from huffcode.reporting.report import envelope_stats, generate_report

__all__ = [
    "envelope_stats",
    "generate_report",
]
