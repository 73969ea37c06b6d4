"""
Dev Browser: ローカル開発サーバーの表示確認ツール

- ports: 開発サーバー検出とURL決定
- session: ブラウザセッション
- inspector: ページ情報と操作可能要素
- screenshots: スクリーンショット保存
- console: コンソールエラー監視
- verify: 検証フロー
"""

__version__ = "0.1.0"
