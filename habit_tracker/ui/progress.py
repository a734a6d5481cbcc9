# ui/progress.py

def progress_bar(percent: int, length: int = 10):
    """Текстовый progress bar фиксированной ширины"""
    percent = max(0, min(100, percent))
    done = (percent * length * 2 + 100) // 200
    todo = length - done
    return "█" * done + "░" * todo + f" {percent}%"

def status_tag(completed: bool):
    return "[Выполнено]" if completed else "[Активна]"
