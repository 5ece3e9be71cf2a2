from fast_selection.utils.measures import compute_speedups


def format_result(result):
    lines = [f'=== array size: {result.size} ===']
    width = max(len(name) for name in result.times) + len(' avg:')
    for name, t in result.times.items():
        lines.append(f'{name + " avg:":<{width}} {t * 1000:.2f} ms')
    for label, ratio in compute_speedups(result).items():
        lines.append(f'{label}: {ratio:.2f}x')
    return lines
