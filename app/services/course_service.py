"""任务页：决定当前播放哪一个视频。"""
from typing import Sequence

from app.models.course import Video

DEFAULT_LANGUAGE = "english"
DEFAULT_QUALITY = "720p"


def select_current_video(videos: Sequence[Video]) -> Video | None:
    """优先第 1 个视频的英文 720p 版本，否则取列表第一个；没有视频返回 None。

    尚未记录学习进度，所以总是从第一个视频开始。
    """
    for v in videos:
        if v.video_order == 1 and v.language == DEFAULT_LANGUAGE and v.quality == DEFAULT_QUALITY:
            return v
    return videos[0] if videos else None
