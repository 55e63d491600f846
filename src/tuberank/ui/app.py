import asyncio
import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path

import streamlit as st

from tuberank.categories import VideoCategory
from tuberank.config import get_settings
from tuberank.providers.llm.factory import create_client
from tuberank.service.controller import GenerationController
from tuberank.ui import clipboard
from tuberank.ui.progress import ProgressTicker

logger = logging.getLogger(__name__)
POLL_SECONDS = 0.2
PENDING_KEY = "generation_pending"
CATEGORIES = list(VideoCategory)


def get_controller() -> GenerationController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = GenerationController(create_client(get_settings()))
    return st.session_state["controller"]


def is_locked(controller: GenerationController) -> bool:
    return bool(st.session_state.get(PENDING_KEY)) or not controller.can_submit


def request_generation() -> None:
    if not is_locked(get_controller()):
        st.session_state[PENDING_KEY] = True


# ==========================
# Form
# ==========================
def render_form(controller: GenerationController) -> None:
    topic = st.text_area(
        "فكرة الفيديو",
        key="topic_input",
        placeholder="اكتب فكرة الفيديو هنا... (مثال: أفضل هواتف للألعاب بسعر رخيص)",
        height=130,
    )
    audience = st.text_input(
        "الجمهور المستهدف (اختياري)",
        key="audience_input",
        placeholder="مثال: المبتدئين، الطلاب، محبي التقنية...",
    )
    category = st.selectbox(
        "فئة الفيديو (هام للتصنيف)",
        CATEGORIES,
        index=CATEGORIES.index(controller.category),
        format_func=lambda item: item.label,
        key="category_input",
    )
    controller.set_topic(topic)
    controller.set_audience(audience)
    controller.set_category(category)

    locked = is_locked(controller)
    if controller.error and not locked:
        st.error(controller.error)

    st.button(
        "⏳ جاري المعالجة..." if locked else "✨ تجهيز خطة النشر",
        type="primary",
        disabled=locked,
        on_click=request_generation,
        use_container_width=True,
    )


# ==========================
# Loading sequence
# ==========================
def render_loader(ticker: ProgressTicker) -> None:
    st.progress(int(ticker.progress), text=f"جاري المعالجة بواسطة الذكاء الاصطناعي {round(ticker.progress)}%")
    for index, caption in enumerate(ticker.captions):
        if ticker.is_done(index):
            st.markdown(f"✅ ~~{caption}~~")
        elif ticker.is_current(index):
            st.markdown(f"🔴 **{caption}**")
        else:
            st.markdown(f"⚪ {caption}")


def run_generation(controller: GenerationController) -> None:
    ticker = ProgressTicker()
    placeholder = st.empty()
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(asyncio.run, controller.submit())
        last_tick = time.monotonic()
        rendered_step = -1
        while not future.done():
            if rendered_step != ticker.step:
                with placeholder.container():
                    render_loader(ticker)
                rendered_step = ticker.step
            wait([future], timeout=POLL_SECONDS)
            if time.monotonic() - last_tick >= ticker.interval:
                ticker.advance()
                last_tick = time.monotonic()
        future.result()
    placeholder.empty()


# ==========================
# Result panels
# ==========================
def render_result(controller: GenerationController) -> None:
    result = controller.result
    if controller.loading or result is None:
        return

    st.info(f"**استراتيجية الخوارزمية (2025)**\n\n{result.algorithm_strategy}\n\nالتصنيف المقترح: `{result.category}`")

    st.subheader("أفكار للصورة المصغرة (Thumbnails)")
    for column, idea in zip(st.columns(3), result.thumbnail_ideas):
        with column:
            with st.container(border=True):
                st.markdown(f"### {idea.text}")
                st.caption("المشهد")
                st.write(idea.description)
                st.caption("النص المقترح")
                st.code(clipboard.thumbnail_text(idea), language=None)

    st.subheader("العناوين المقترحة (عالية النقر)")
    for title in result.titles:
        st.code(clipboard.title_text(title), language=None)

    st.subheader("الوصف (مهيأ لمحركات البحث)")
    st.code(clipboard.description_text(result), language=None, wrap_lines=True)

    keywords_col, hashtags_col = st.columns(2)
    with keywords_col:
        st.subheader("الكلمات المفتاحية (Tags)")
        st.markdown(" ".join(f"`{keyword}`" for keyword in result.keywords))
        st.caption("نسخ الكل")
        st.code(clipboard.keywords_text(result.keywords), language=None, wrap_lines=True)
    with hashtags_col:
        st.subheader("الهاشتاقات (#)")
        st.markdown(" ".join(f":blue[{tag}]" for tag in result.hashtags))
        st.caption("نسخ الكل")
        st.code(clipboard.hashtags_text(result.hashtags), language=None, wrap_lines=True)


def main() -> None:
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    st.set_page_config(page_title="TubeRank AI", page_icon="▶️", layout="wide")
    st.title("▶️ TubeRank AI")
    st.caption("حول فكرتك إلى خطة نشر متكاملة على يوتيوب.")

    controller = get_controller()
    form_col, result_col = st.columns([4, 8], gap="large")
    with form_col:
        render_form(controller)
    with result_col:
        if st.session_state.get(PENDING_KEY) and not controller.loading:
            try:
                run_generation(controller)
            finally:
                st.session_state[PENDING_KEY] = False
            st.rerun()
        render_result(controller)


def run() -> None:
    from streamlit.web import cli as stcli

    sys.argv = ["streamlit", "run", str(Path(__file__).resolve())]
    sys.exit(stcli.main())


if __name__ == "__main__":
    main()
