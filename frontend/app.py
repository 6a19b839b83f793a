import streamlit as st
import requests
import os

# Page configuration
st.set_page_config(
    page_title="StudyBot",
    page_icon="📚",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")
MIN_SUMMARY_CHARS = 50
TABS = ("chat", "summarizer", "quiz")

# Initialize session state
for tab in TABS:
    key = f"{tab}_history"
    if key not in st.session_state:
        st.session_state[key] = []
if "api_status" not in st.session_state:
    st.session_state.api_status = None


def main():
    st.title("📚 StudyBot")

    with st.sidebar:
        show_api_status()

        st.header("🧹 History")
        for tab in TABS:
            if st.button(f"Clear {tab} history", key=f"clear_{tab}"):
                clear_history(tab)

    chat_tab, summarizer_tab, quiz_tab = st.tabs(["💬 Chat", "📝 Summarizer", "❓ Quiz"])
    with chat_tab:
        show_chat()
    with summarizer_tab:
        show_summarizer()
    with quiz_tab:
        show_quiz()


def show_api_status():
    """Warn once per session when the backend has no Gemini key"""
    if st.session_state.api_status is None:
        st.session_state.api_status = fetch_api_status()

    status = st.session_state.api_status
    st.header("🔌 Backend")
    if status.get("error"):
        st.error(f"API connection test failed: {status['error']}")
    elif not status.get("gemini_key_present"):
        st.warning("Warning: Gemini API key not configured")
    else:
        st.success(f"Connected ({status.get('model', 'unknown model')})")


def fetch_api_status():
    """A failed check is stored as {"error": ...} so it is not retried on every rerun"""
    try:
        response = requests.get(f"{API_BASE_URL}/test", timeout=10)
    except requests.RequestException as e:
        return {"error": str(e)}
    if response.status_code != 200:
        return {"error": f"HTTP {response.status_code}"}
    try:
        return response.json()
    except ValueError:
        return {"error": "Invalid response format"}


def call_backend(action, payload):
    """POST an action to the backend; failures come back as {"error": ...}"""
    try:
        response = requests.post(
            f"{API_BASE_URL}/groq",
            json={"action": action, "payload": payload},
            timeout=120,
        )
    except requests.RequestException as e:
        return {"error": f"{e}. Make sure the server is running and GEMINI_API_KEY is set"}

    try:
        data = response.json()
    except ValueError:
        return {"error": f"Invalid response format: {response.text[:100]}..."}

    if response.status_code != 200:
        return {"error": data.get("error", f"HTTP {response.status_code}")}
    return data


def show_history(tab):
    for message in st.session_state[f"{tab}_history"]:
        with st.chat_message(message["role"]):
            if message.get("questions") is not None:
                render_quiz(message["topic"], message["questions"], message.get("raw", ""))
            else:
                st.write(message["content"])


def show_chat():
    show_history("chat")

    if prompt := st.chat_input("Ask anything..."):
        st.session_state.chat_history.append({"role": "user", "content": prompt})
        with st.spinner("Thinking..."):
            resp = call_backend("chat", {"text": prompt})

        if resp.get("error"):
            reply = f"Error: {resp['error']}"
        else:
            reply = resp.get("reply", "")
        st.session_state.chat_history.append({"role": "assistant", "content": reply})
        st.rerun()


def show_summarizer():
    show_history("summarizer")

    text = st.text_area("Text to summarize", key="summarizer_input", height=200)
    if st.button("✨ Summarize Text", type="primary"):
        text = (text or "").strip()
        if not text:
            st.warning("Please enter text to summarize.")
            return
        if len(text) < MIN_SUMMARY_CHARS:
            st.warning(f"Please enter more text (at least {MIN_SUMMARY_CHARS} characters) for a meaningful summary.")
            return

        with st.spinner("Summarizing..."):
            resp = call_backend("summarize", {"text": text})

        if resp.get("error"):
            st.error(f"Summarization error: {resp['error']}")
            return
        st.session_state.summarizer_history.append({"role": "assistant", "content": resp.get("result", "")})
        st.rerun()


def show_quiz():
    show_history("quiz")

    col1, col2 = st.columns([3, 1])
    with col1:
        topic = st.text_input("Quiz topic", key="quiz_input")
    with col2:
        count = st.number_input("Questions", min_value=1, max_value=20, value=5, step=1)

    if st.button("🎯 Generate Quiz", type="primary"):
        topic = (topic or "").strip()
        if not topic:
            st.warning("Please enter a topic for the quiz.")
            return

        with st.spinner("Generating Quiz..."):
            resp = call_backend("quiz", {"text": topic, "count": int(count)})

        if resp.get("error"):
            st.error(f"Quiz generation error: {resp['error']}")
            return

        st.session_state.quiz_history.append({
            "role": "assistant",
            "topic": topic,
            "questions": resp.get("questions") or resp.get("quiz") or [],
            "raw": resp.get("raw", ""),
        })
        st.rerun()


def render_quiz(topic, questions, raw):
    """Structured questions get options and an answer expander; plain strings are shown as-is"""
    st.subheader(f"Quiz: {topic}")
    if not questions:
        st.write(raw)
        return

    for index, item in enumerate(questions, start=1):
        if isinstance(item, str):
            st.write(item)
            continue

        st.markdown(f"**{index}. {item.get('question') or f'Question {index}'}**")
        for option in item.get("options", []):
            st.write(f"- {option}")
        if item.get("answer"):
            with st.expander("Show answer"):
                st.success(f"Answer: {item['answer']}")


def clear_history(tab):
    st.session_state[f"{tab}_history"] = []
    st.rerun()


if __name__ == "__main__":
    main()
