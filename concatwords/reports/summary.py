"""Summary report generation."""

from pathlib import Path

from concatwords.reports.data import ReportData
from concatwords.reports.helpers import format_time, write_report_header, write_subsection_header
from concatwords.utils import write_file_safely


def _write_source_section(f, analysis) -> None:
    result = analysis.result
    write_subsection_header(f, f"SOURCE: {analysis.source}", width=70)
    f.write(f"Words loaded:                       {analysis.words_loaded:,}\n")
    f.write(f"Distinct dictionary words:          {analysis.dictionary_size:,}\n")
    f.write(f"Rejected words:                     {analysis.rejected_count:,}\n")
    f.write(f"Shortest word length:               {analysis.shortest_length}\n")
    f.write(f"Composite words:                    {result.total_count:,}\n")
    f.write(f"Longest:          {result.longest or '-'} ({result.longest_length})\n")
    f.write(f"Second longest:   {result.second_longest or '-'} ({result.second_longest_length})\n")

    for word, components in analysis.decompositions.items():
        f.write(f"  {word} = {' + '.join(components)}\n")
    f.write("\n")

    if analysis.stage_times:
        total_time = sum(analysis.stage_times.values())
        for stage, duration in analysis.stage_times.items():
            pct = (duration / total_time * 100) if total_time > 0 else 0
            f.write(f"{stage:<35} {format_time(duration):>12} ({pct:>5.1f}%)\n")
        f.write("-" * 70 + "\n")
        f.write(f"{'Total':<35} {format_time(total_time):>12}\n\n")


def generate_summary_report(data: ReportData, report_dir: Path) -> None:
    """Generate summary report."""
    filepath = report_dir / "summary.txt"

    def write_summary_content(f):
        write_report_header(f, "COMPOSITE WORD ANALYSIS SUMMARY")
        f.write(f"Sources analyzed: {len(data.analyses)}\n\n")
        for analysis in data.analyses:
            _write_source_section(f, analysis)

    write_file_safely(filepath, write_summary_content, "writing summary report")
