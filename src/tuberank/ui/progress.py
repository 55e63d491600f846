from dataclasses import dataclass, field

STEP_INTERVAL_SECONDS = 1.8

CAPTIONS = (
    "تحليل فكرة الفيديو والجمهور المستهدف...",
    "فحص خوارزميات اليوتيوب (تحديثات 2025)...",
    "توليد عناوين جذابة لزيادة نسبة النقر (CTR)...",
    "اختيار الكلمات المفتاحية الأكثر بحثاً...",
    "صياغة وصف احترافي وتنسيق المحتوى...",
)


@dataclass
class ProgressTicker:
    """Cosmetic loading sequence; unrelated to the real request's progress."""

    captions: tuple[str, ...] = CAPTIONS
    interval: float = STEP_INTERVAL_SECONDS
    step: int = field(default=0)

    def advance(self) -> int:
        if self.step < len(self.captions) - 1:
            self.step += 1
        return self.step

    @property
    def progress(self) -> float:
        return min((self.step + 1) / len(self.captions) * 100, 100.0)

    def is_done(self, index: int) -> bool:
        return index < self.step

    def is_current(self, index: int) -> bool:
        return index == self.step
