# streamlit_app.py
# Run from src/:  streamlit run views/streamlit_app.py

import sys
from pathlib import Path

src_dir = Path(__file__).resolve().parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import logging
import streamlit as st
import pandas as pd
from dotenv import load_dotenv
from typing import List, Optional
from helpers.config import get_settings
from helpers.geolocation import LocationResult
from models.db_schemes import MapMarker, MessageRole, SessionState, ChatSession
from services import SessionService, AuthService, AuthError
from stores.sessionstore.SessionStoreProviderFactory import SessionStoreProviderFactory
from stores.llm.multimodal_utils import MultimodalUtils
from views.api_client import HealthAssistClient, HealthAssistAPIError
from views.image_upload import uploaded_image_to_data_uri, SUPPORTED_IMAGE_TYPES

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(message)s',
)
logger = logging.getLogger(__name__)

# --- Must be first Streamlit command ---
st.set_page_config(page_title="HealthAssist AI", page_icon="🩺", layout="wide")

load_dotenv(dotenv_path=src_dir / ".env")
settings = get_settings()

@st.cache_resource
def get_services():
    session_store = SessionStoreProviderFactory(settings).create(provider=settings.SESSION_STORE_BACKEND)
    if session_store is None:
        raise ValueError(f"Unknown session store backend: {settings.SESSION_STORE_BACKEND}")
    return SessionService(session_store), AuthService(session_store)

session_service, auth_service = get_services()
api_client = HealthAssistClient(base_url=settings.FASTAPI_URL)

DISCLAIMER = ("HealthAssist AI provides information only. It is not a diagnosis. "
              "Always consult a qualified healthcare professional.")

# --- Initialize Streamlit Session State ---
if "chat_state" not in st.session_state:
    logger.info("Loading chat history from the session store")
    st.session_state.chat_state = session_service.load()
if "doctor_results" not in st.session_state:
    st.session_state.doctor_results = None
if "hospital_results" not in st.session_state:
    st.session_state.hospital_results = None


def commit(state: SessionState):
    st.session_state.chat_state = state
    session_service.save(state)


def active_session() -> Optional[ChatSession]:
    state = st.session_state.chat_state
    if not state.active_session_id:
        return None
    return session_service.get_session(state, state.active_session_id)


# --- Auth ---
def render_auth():
    st.title("🩺 HealthAssist AI")
    st.caption(DISCLAIMER)
    login_tab, signup_tab = st.tabs(["Log in", "Sign up"])

    with login_tab:
        with st.form("login_form"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            if st.form_submit_button("Log in"):
                try:
                    auth_service.login(email, password)
                    st.rerun()
                except AuthError as e:
                    st.error(f"Login Failed: {e}")

    with signup_tab:
        with st.form("signup_form"):
            email = st.text_input("Email")
            password = st.text_input("Password (at least 6 characters)", type="password")
            if st.form_submit_button("Create account"):
                try:
                    auth_service.register(email, password)
                    st.rerun()
                except AuthError as e:
                    st.error(f"Registration Failed: {e}")


# --- Sidebar ---
def render_sidebar(user):
    st.sidebar.header("👤 Account")
    st.sidebar.write(user.display_name or user.email)
    if st.sidebar.button("Log out"):
        auth_service.logout()
        st.rerun()

    st.sidebar.header("📍 Location")
    share_location = st.sidebar.checkbox("Use my coordinates", value=False)
    lat = st.sidebar.number_input("Latitude", value=settings.DEFAULT_LOCATION_LAT, format="%.4f", disabled=not share_location)
    lng = st.sidebar.number_input("Longitude", value=settings.DEFAULT_LOCATION_LNG, format="%.4f", disabled=not share_location)

    st.sidebar.header("💬 Chat History")
    if st.sidebar.button("➕ New chat"):
        commit(st.session_state.chat_state.model_copy(update={"active_session_id": None}))
        st.session_state.doctor_results = None
        st.rerun()

    state = st.session_state.chat_state
    for session in session_service.sorted_sessions(state):
        title_col, delete_col = st.sidebar.columns([5, 1])
        label = session_service.session_title(session)
        if session.id == state.active_session_id:
            label = f"▶ {label}"
        if title_col.button(label, key=f"open_{session.id}"):
            commit(state.model_copy(update={"active_session_id": session.id}))
            st.session_state.doctor_results = None
            st.rerun()
        if delete_col.button("🗑", key=f"delete_{session.id}"):
            commit(session_service.delete_session(state, session.id))
            st.rerun()

    if state.sessions and st.sidebar.button("Clear all history"):
        st.session_state.chat_state = session_service.clear()
        st.rerun()

    return (lat, lng) if share_location else (None, None)


# --- Symptom form ---
def render_symptom_form():
    st.subheader("Describe your symptoms")
    with st.form("symptom_form", clear_on_submit=False):
        symptoms = st.text_area("Symptoms", placeholder="e.g. I have a headache, fever, and sore throat")
        uploaded_file = st.file_uploader("Image of the symptom or injury (optional)", type=SUPPORTED_IMAGE_TYPES)
        submitted = st.form_submit_button("Get AI insights")

    if not submitted:
        return

    image_data_uri = None
    if uploaded_file is not None:
        try:
            image_data_uri = uploaded_image_to_data_uri(uploaded_file.getvalue())
        except ValueError as e:
            st.error(f"Image Error: {e}")
            return

    with st.spinner("🔍 Analyzing your symptoms..."):
        try:
            ai_response = api_client.analyze(symptoms, image_data_uri=image_data_uri)
        except HealthAssistAPIError as e:
            logger.error(f"AI analysis failed: {e}")
            st.error(f"AI Analysis Error: {e}")
            return

    state, session = session_service.start_session(
        st.session_state.chat_state, symptoms=symptoms, image_data_uri=image_data_uri,
    )
    state = session_service.update_session(state, session.id, ai_response=ai_response)
    state = session_service.add_message(state, session.id, MessageRole.AI,
                                        ai_response.severity_assessment.severity_assessment)
    commit(state)
    st.rerun()


# --- Results ---
def render_results(session: ChatSession):
    ai_response = session.ai_response
    severity = ai_response.severity_assessment

    st.subheader("🩺 Severity Assessment")
    st.markdown(severity.severity_assessment)
    st.info(f"**Recommended next steps:** {severity.next_steps_recommendation}")
    if severity.questions_to_consider:
        with st.expander("Questions to consider"):
            for question in severity.questions_to_consider:
                st.markdown(f"- {question}")

    st.subheader("🧾 Potential Conditions")
    if not ai_response.potential_conditions:
        st.write("No specific conditions were suggested.")
    for idx, condition in enumerate(ai_response.potential_conditions):
        with st.container(border=True):
            st.markdown(f"**{condition.condition}**")
            st.write(condition.explanation)
            if condition.distinguishing_symptoms:
                st.caption("Distinguishing symptoms: " + ", ".join(condition.distinguishing_symptoms))
            if st.button("Tell me more about this", key=f"refine_{session.id}_{idx}"):
                refine_condition(session, condition.condition)

    if session.refined_advice:
        st.subheader("🔎 Refined Advice")
        st.markdown(session.refined_advice.refined_advice)
        if session.refined_advice.confidence:
            st.caption(session.refined_advice.confidence)


def refine_condition(session: ChatSession, selected_condition: str):
    with st.spinner(f"Looking closer at {selected_condition}..."):
        try:
            refined_advice = api_client.refine(session.current_symptoms, selected_condition)
        except HealthAssistAPIError as e:
            st.error(f"Refined AI Analysis Error: {e}")
            return
    commit(session_service.update_session(st.session_state.chat_state, session.id, refined_advice=refined_advice))
    st.rerun()


# --- Follow-up chat ---
def render_follow_up(session: ChatSession):
    st.subheader("💬 Follow-up")
    for message in session.messages:
        with st.chat_message("user" if message.role == MessageRole.USER.value else "assistant"):
            st.markdown(message.text)

    question = st.chat_input("Ask a follow-up question about your symptoms...")
    if not question:
        return
    if not question.strip():
        st.error("Please type your message.")
        return

    with st.spinner("Thinking..."):
        try:
            clarification = api_client.clarify(
                original_symptoms=session.current_symptoms,
                user_question=question,
                ai_response=session.ai_response,
                image_data_uri=session.image_data_uri,
            )
        except HealthAssistAPIError as e:
            st.error(f"Chat Error: {e}")
            return

    state = st.session_state.chat_state
    state = session_service.add_message(state, session.id, MessageRole.USER, question)
    state = session_service.add_message(state, session.id, MessageRole.AI, clarification.clarification_text)
    if clarification.has_updates:
        state = session_service.update_session(state, session.id,
                                               ai_response=clarification.apply_to(session.ai_response))
        st.toast("AI Insights Updated: the assessment was revised based on your chat.")
    commit(state)
    st.rerun()


# --- Map ---
def render_markers(location_result: LocationResult, markers: List[MapMarker]):
    if location_result.is_default and location_result.notice:
        st.warning(location_result.notice)

    map_df = pd.DataFrame(
        [{"lat": location_result.location.lat, "lon": location_result.location.lng}]
        + [{"lat": m.position.lat, "lon": m.position.lng} for m in markers]
    )
    st.map(map_df, zoom=13)

    for marker in markers:
        with st.container(border=True):
            heading = f"**{marker.title}**"
            if marker.is_recommended:
                heading += "  ⭐ Recommended"
            st.markdown(heading)
            details = [d for d in (marker.specialty, marker.distance, marker.phone) if d]
            if details:
                st.caption(" · ".join(details))
            if marker.description:
                st.write(marker.description)
            if marker.website:
                st.markdown(f"[Website]({marker.website})")


def render_doctors(session: ChatSession, lat, lng):
    st.subheader("👩‍⚕️ Find Nearby Medical Professionals")
    if st.button("Show doctors near me"):
        with st.spinner("Finding the right kind of doctor..."):
            try:
                specialty = api_client.suggest_specialty(session.current_symptoms)
                location_result, markers = api_client.nearby_doctors(
                    lat=lat, lng=lng, specialty=specialty.suggested_specialty,
                )
            except HealthAssistAPIError as e:
                st.error(f"Error: {e}")
                return
        commit(session_service.update_session(st.session_state.chat_state, session.id, specialty=specialty))
        st.session_state.doctor_results = (location_result, markers)

    if session.specialty:
        st.success(f"Suggested specialty: **{session.specialty.suggested_specialty}**. {session.specialty.reasoning}")
    if st.session_state.doctor_results:
        render_markers(*st.session_state.doctor_results)


def render_hospitals(lat, lng):
    st.subheader("🏥 Nearby Hospitals")
    if st.button("Show hospitals near me"):
        try:
            st.session_state.hospital_results = api_client.nearby_hospitals(lat=lat, lng=lng)
        except HealthAssistAPIError as e:
            st.error(f"Error: {e}")
            return
    if st.session_state.hospital_results:
        render_markers(*st.session_state.hospital_results)


# --- Page ---
current_user = auth_service.current_user()
if current_user is None:
    render_auth()
    st.stop()

lat, lng = render_sidebar(current_user)

st.title("🩺 HealthAssist AI")
st.caption(DISCLAIMER)

symptoms_tab, hospitals_tab = st.tabs(["Symptom checker", "Hospitals"])

with symptoms_tab:
    session = active_session()
    if session is None or session.ai_response is None:
        render_symptom_form()
    else:
        st.markdown(f"**Your symptoms:** {session.current_symptoms}")
        if session.image_data_uri:
            _, image_bytes = MultimodalUtils.parse_data_uri(session.image_data_uri)
            st.image(image_bytes, width=240)
        render_results(session)
        render_follow_up(session)
        render_doctors(session, lat, lng)

with hospitals_tab:
    render_hospitals(lat, lng)
