"""Streamlit app entry point - thin wrapper"""
from schedule_viewer.main import render

# Main execution
render()
