from enum import Enum


class VideoCategory(str, Enum):
    """Closed set of content categories offered in the form.

    Values are the labels shown to the user and embedded verbatim in the
    instruction sent to the model.
    """

    MUSIC = "الموسيقى (Music)"
    GAMING = "ألعاب الفيديو (Gaming)"
    TECH = "تقنية واختراعات"
    EDUCATION = "تعليم وشروحات"
    ENTERTAINMENT = "ترفيه وكوميديا"
    VLOG = "يوميات وفلوقات"
    SPORTS = "رياضة"
    COOKING = "طبخ ووصفات"
    NEWS = "أخبار وترندات"
    HEALTH = "صحة ولياقة"
    BUSINESS = "بزنس ومال"
    ART = "فن وتصميم"
    RELIGIOUS = "محتوى ديني"
    OTHER = "أخرى"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, text: str) -> "VideoCategory":
        candidate = text.strip()
        member = cls.__members__.get(candidate.upper())
        if member is not None:
            return member
        for item in cls:
            if item.value == candidate:
                return item
        raise ValueError(f"unknown category: {text!r}")


DEFAULT_CATEGORY = VideoCategory.TECH
